"""
External tables processing module.

Converts raw 2D tables → headers + list of dicts, for both the standard
header-row layout and the two-column field/value layout.
"""
import logging
from enum import Enum
from typing import Any, Dict, List, Tuple

logger = logging.getLogger(__name__)


class Layout(Enum):
    """Shape of a raw table."""
    TABULAR = "tabular"          # header row + one row per record
    FIELD_VALUE = "field_value"  # two columns, one record as (field, value) pairs


def clean_cell(value: Any) -> str:
    """
    Clean a cell used as a header or field name.

    Args:
        value: Raw cell value

    Returns:
        Stripped string ("" for None)
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, float) and value != value) or str(value).strip() == ""


def drop_empty_rows(rows: List[List[Any]]) -> List[List[Any]]:
    """
    Remove rows that are empty or contain only empty/None values.

    Args:
        rows: 2D list of raw values

    Returns:
        2D list with empty rows removed
    """
    return [row for row in rows if not is_empty_row(row)]


def is_empty_row(row: List[Any]) -> bool:
    return all(_is_blank(value) for value in row)


def non_empty_row_numbers(rows: List[List[Any]]) -> List[int]:
    """1-based source positions of the rows drop_empty_rows keeps."""
    return [i for i, row in enumerate(rows, start=1) if not is_empty_row(row)]


def detect_layout(rows: List[List[Any]]) -> Layout:
    """
    Detect whether a table is a field/value listing or a standard table.

    A field/value table starts with a row whose first two non-empty cells
    are labels like "Field" and "Value".
    """
    if not rows:
        return Layout.TABULAR

    labels = [clean_cell(cell).lower() for cell in rows[0] if not _is_blank(cell)]
    if len(labels) == 2 and "field" in labels[0] and "value" in labels[1]:
        logger.debug("[detect_layout] Detected Field,Value layout")
        return Layout.FIELD_VALUE
    return Layout.TABULAR


def dedupe_headers(headers: List[str]) -> List[str]:
    """Make header names unique the way pandas does: Price, Price.1, Price.2."""
    seen: Dict[str, int] = {}
    unique = []
    for header in headers:
        if header not in seen:
            seen[header] = 0
            unique.append(header)
            continue
        seen[header] += 1
        candidate = f"{header}.{seen[header]}"
        while candidate in seen:
            seen[header] += 1
            candidate = f"{header}.{seen[header]}"
        seen[candidate] = 0
        unique.append(candidate)
    return unique


def rows2d_to_objects(values: List[List[Any]], header_row_index: int = 0) -> Tuple[List[str], List[Dict[str, Any]]]:
    """
    Convert a 2D list/array to headers and a list of dictionaries.

    Trailing unnamed columns with no data are dropped; duplicate header
    names are made unique.

    Args:
        values: 2D list where first row (or header_row_index) contains headers
        header_row_index: Index of the row containing headers (default: 0)

    Returns:
        Tuple of (headers, records), one record per data row
    """
    if not values or len(values) <= header_row_index:
        return [], []

    header_cells = [clean_cell(h) for h in values[header_row_index]]
    data_rows = values[header_row_index + 1:]

    # Drop trailing unnamed columns that carry no data
    width = len(header_cells)
    while width > 0 and not header_cells[width - 1]:
        column = width - 1
        if any(column < len(row) and not _is_blank(row[column]) for row in data_rows):
            break
        width -= 1
    headers = dedupe_headers(header_cells[:width])

    objects = []
    for row in data_rows:
        obj = {}
        for i, header in enumerate(headers):
            obj[header] = row[i] if i < len(row) else None
        objects.append(obj)

    return headers, objects


def field_value_to_object(values: List[List[Any]]) -> Tuple[List[str], Dict[str, Any]]:
    """
    Convert a two-column field/value table into a single record.

    The first row holds the column labels and is skipped. Rows with a blank
    field name are ignored; a repeated field name keeps its last value.

    Returns:
        Tuple of (field names in first-seen order, record)
    """
    headers: List[str] = []
    record: Dict[str, Any] = {}

    for row in values[1:]:
        if not row:
            continue
        field = clean_cell(row[0])
        if not field:
            continue
        value = row[1] if len(row) > 1 else None
        if field in record:
            logger.debug(f"[field_value_to_object] Field '{field}' repeated; keeping last value")
        else:
            headers.append(field)
        record[field] = value

    return headers, record
