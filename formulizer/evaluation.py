"""Request and result shapes exchanged with the formula evaluation service."""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import EvaluationError
from .formula_text import extract_global_variables

if TYPE_CHECKING:
    from .controller import FormState


class EvaluationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    entered_formula: str
    return_type: str
    obj_type: str
    handle_blank_values: bool = False
    global_variables_list: List[str] = Field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        """Wire body for the evaluate endpoint.

        globalVariablesList travels as a JSON-encoded string.
        """
        return {
            'enteredFormula': self.entered_formula,
            'returnType': self.return_type,
            'objType': self.obj_type,
            'handleBlankValues': self.handle_blank_values,
            'globalVariablesList': json.dumps(self.global_variables_list),
        }


class EvaluationResultItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    obj_data: Dict[str, Any] = Field(default_factory=dict, alias='objData')
    formula_output: Any = Field(default=None, alias='formulaOutput')

    @field_validator('obj_data', mode='before')
    @classmethod
    def _none_as_empty(cls, value):
        return {} if value is None else value


def build_request(state: "FormState") -> EvaluationRequest:
    return EvaluationRequest(
        entered_formula=state.entered_formula,
        return_type=state.selected_return_type,
        obj_type=state.selected_object,
        handle_blank_values=bool(state.handle_blank_values),
        global_variables_list=extract_global_variables(state.entered_formula),
    )


def parse_results(payload: Any) -> List[EvaluationResultItem]:
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise EvaluationError("Unexpected response from the formula service: expected a list of results.")
    try:
        return [EvaluationResultItem.model_validate(item) for item in payload]
    except ValidationError as e:
        raise EvaluationError(f"Malformed result from the formula service: {e.errors()[0]['msg']}") from e
