"""Form state and the evaluate request/response cycle behind the Formulize button."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from .client import object_options
from .evaluation import build_request
from .exceptions import RemoteCallError, UnknownFieldError
from .flattening import flatten_results
from .notifications import Notifier, Severity
from .reference_data import return_type_options

logger = logging.getLogger(__name__)

EVALUATION_ERROR_TITLE = 'Formula Validation Error'
OBJECT_LIST_ERROR_TITLE = 'Error retrieving object list'
UNEXPECTED_ERROR_MESSAGE = 'The formula could not be evaluated.'


class Status(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class FormState:
    selected_object: str = ''
    selected_return_type: str = ''
    entered_formula: str = ''
    handle_blank_values: bool = False
    is_loading: bool = False


def _as_text(value: Any) -> str:
    return '' if value is None else str(value)


# Stable field id -> setter. Display labels are free to change.
FIELD_SETTERS: Dict[str, Callable[[FormState, Any], None]] = {
    'object': lambda state, value: setattr(state, 'selected_object', _as_text(value)),
    'return_type': lambda state, value: setattr(state, 'selected_return_type', _as_text(value)),
    'formula': lambda state, value: setattr(state, 'entered_formula', _as_text(value)),
    'handle_blank_values': lambda state, value: setattr(state, 'handle_blank_values', bool(value)),
}


class FormController:
    """Owns the form state and orchestrates calls to the formula service.

    `service` needs `evaluate(request)` and `list_queryable_objects()` coroutines
    (see PlatformClient); `notifier` receives user-visible alerts.
    """

    def __init__(self, service, notifier: Notifier):
        self.service = service
        self.notifier = notifier
        self.state = FormState()
        self.status = Status.IDLE
        self.return_type_options: List[Dict[str, str]] = []
        self.object_options: List[Dict[str, str]] = []
        self.columns: List[Dict[str, str]] = []
        self.rows: Optional[List[Dict[str, Any]]] = None

    @property
    def can_submit(self) -> bool:
        state = self.state
        return bool(state.selected_object and state.selected_return_type and state.entered_formula)

    @property
    def is_busy(self) -> bool:
        return self.state.is_loading

    def update_field(self, field_id: str, value: Any) -> bool:
        """Apply a field change and return the new submit enablement."""
        setter = FIELD_SETTERS.get(field_id)
        if setter is None:
            raise UnknownFieldError(field_id)
        setter(self.state, value)
        return self.can_submit

    async def initialize(self) -> None:
        self.return_type_options = return_type_options()
        await self.load_objects()

    async def load_objects(self) -> List[Dict[str, str]]:
        try:
            records = await self.service.list_queryable_objects()
        except RemoteCallError as e:
            logger.error(f"Failed to load queryable objects: {e.message}")
            await self.notifier.alert(e.message, Severity.ERROR, OBJECT_LIST_ERROR_TITLE)
            return self.object_options

        self.object_options = object_options(records)
        logger.info(f"Loaded {len(self.object_options)} queryable objects")
        return self.object_options

    async def submit(self) -> Optional[Status]:
        """Evaluate the entered formula.

        Returns the resulting status, or None when submission is unavailable
        (required fields missing or a request already in flight).
        """
        if not self.can_submit:
            logger.debug("Submit ignored: required fields are missing")
            return None
        if self.is_busy:
            logger.info("Submit ignored: an evaluation is already in flight")
            return None

        request = build_request(self.state)
        self.state.is_loading = True
        self.status = Status.LOADING
        try:
            results = await self.service.evaluate(request)
            self.columns, self.rows = flatten_results(results)
        except RemoteCallError as e:
            logger.warning(f"Evaluation failed: {e.message}")
            return await self._fail(e.message)
        except Exception as e:
            logger.exception("Unexpected error during evaluation")
            return await self._fail(str(e) or UNEXPECTED_ERROR_MESSAGE)
        finally:
            self.state.is_loading = False

        self.status = Status.SUCCESS
        logger.info(f"Evaluation returned {len(self.rows)} rows, {len(self.columns)} columns")
        return self.status

    async def _fail(self, message: str) -> Status:
        self.columns = []
        self.rows = None
        self.status = Status.ERROR
        self.state.is_loading = False
        await self.notifier.alert(message, Severity.ERROR, EVALUATION_ERROR_TITLE)
        return self.status
