from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

FORMULA_RESPONSE_FIELD = 'formulaResponse'
FORMULA_RESPONSE_LABEL = 'Formula Response'


def formula_response_column() -> Dict[str, str]:
    return {'label': FORMULA_RESPONSE_LABEL, 'field_name': FORMULA_RESPONSE_FIELD, 'type': 'text'}


def flatten_record(data: Mapping[str, Any], parent_key: str = '', sep: str = '.') -> Dict[str, Any]:
    """Flatten a nested mapping into {dotted.path: scalar}.

    Nested mappings are walked; lists and None are kept as opaque values.
    Empty mappings contribute no keys. When two paths collapse onto the same
    key the one visited last wins.
    """
    flat: Dict[str, Any] = {}
    for k, v in data.items():
        current_key = f"{parent_key}{sep}{k}" if parent_key else str(k)
        if isinstance(v, Mapping):
            flat.update(flatten_record(v, current_key, sep))
        else:
            flat[current_key] = v
    return flat


def _item_parts(item: Any) -> Tuple[Mapping[str, Any], Any]:
    # Accepts EvaluationResultItem models as well as raw {objData, formulaOutput} dicts.
    if isinstance(item, Mapping):
        return item.get('objData') or {}, item.get('formulaOutput')
    return item.obj_data or {}, item.formula_output


def flatten_results(results: Iterable[Any]) -> Tuple[List[Dict[str, str]], List[Dict[str, Any]]]:
    """Turn evaluation results into (columns, rows) for the data grid.

    Columns list every flattened path seen in any row, in order of first
    occurrence, followed by the formula response column. Rows are sparse.
    """
    seen: Dict[str, None] = {}
    rows: List[Dict[str, Any]] = []

    for item in results:
        obj_data, formula_output = _item_parts(item)
        flat = flatten_record(obj_data)
        for key in flat:
            if key != FORMULA_RESPONSE_FIELD:
                seen.setdefault(key, None)
        row = dict(flat)
        row[FORMULA_RESPONSE_FIELD] = formula_output
        rows.append(row)

    columns = [{'label': key, 'field_name': key} for key in seen]
    columns.append(formula_response_column())
    return columns, rows


def rows_to_table(
    columns: List[Dict[str, str]],
    rows: Optional[List[Dict[str, Any]]],
) -> Tuple[List[str], List[List[Any]]]:
    """Densify sparse rows into (headers, matrix); missing cells are None.

    A label already taken by an earlier column falls back to its field name,
    so data carrying a literal "Formula Response" field leaves the formula
    column headed "formulaResponse".
    """
    headers: List[str] = []
    for col in columns:
        label = col['label']
        headers.append(col['field_name'] if label in headers else label)
    if not rows:
        return headers, []
    fields = [col['field_name'] for col in columns]
    return headers, [[row.get(field) for field in fields] for row in rows]
