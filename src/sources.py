"""
Source detection and data extraction utilities.

Supports the upload payloads listing exports arrive as: delimited text (CSV)
and spreadsheets (XLSX, first sheet only). Every source is converted to the
same 2D row/column shape.
"""

from typing import Any, List, Optional, Union
from pathlib import Path
from datetime import datetime
from enum import Enum
import logging
import csv
import io

import pandas as pd

logger = logging.getLogger(__name__)

XLSX_MAGIC = b"PK\x03\x04"


class SourceError(Exception):
    """Raised when a payload cannot be read as tabular data."""
    pass


class SourceType(Enum):
    """Supported data source types."""
    CSV = "csv"
    XLSX = "xlsx_file"
    UNKNOWN = "unknown"


def detect_source_type(name: Optional[str], content: Union[str, bytes]) -> SourceType:
    """
    Detect the type of an uploaded payload.

    Args:
        name: Original file name (may be None)
        content: Raw payload, text or bytes

    Returns:
        SourceType enum value
    """
    suffix = Path(name).suffix.lower() if name else ""

    # File extensions
    if suffix in (".csv", ".txt"):
        return SourceType.CSV
    elif suffix in (".xlsx", ".xlsm"):
        return SourceType.XLSX
    elif suffix:
        return SourceType.UNKNOWN

    # No extension: sniff the content
    if isinstance(content, bytes) and content.startswith(XLSX_MAGIC):
        return SourceType.XLSX
    return SourceType.CSV


def _decode_text(content: Union[str, bytes]) -> str:
    if isinstance(content, str):
        return content.lstrip("\ufeff")
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise SourceError(f"File is not valid UTF-8 text: {e}")


def extract_csv_rows(content: Union[str, bytes]) -> List[List[Any]]:
    """Read comma-delimited, double-quote escaped text into rows of strings."""
    text = _decode_text(content)
    try:
        reader = csv.reader(io.StringIO(text, newline=""))
        return [row for row in reader]
    except csv.Error as e:
        raise SourceError(f"Could not parse CSV: {e}")


def extract_xlsx_rows(content: bytes) -> List[List[Any]]:
    """
    Read the first sheet of a workbook into rows.

    Empty cells become None; numbers stay numbers; dates become ISO strings.
    """
    if isinstance(content, str):
        raise SourceError("Spreadsheet payload must be binary")
    try:
        df = pd.read_excel(io.BytesIO(content), sheet_name=0, header=None, engine="openpyxl", dtype=object)
    except Exception as e:
        raise SourceError(f"Could not read spreadsheet: {e}")

    rows = []
    for _, row in df.iterrows():
        row_values = []
        for val in row:
            if val is None or (not isinstance(val, str) and pd.isna(val)):
                row_values.append(None)
            elif isinstance(val, (datetime, pd.Timestamp)):
                row_values.append(val.isoformat())
            else:
                row_values.append(val)
        rows.append(row_values)

    logger.debug(f"[Excel] Read {len(rows)} row(s) from first sheet")
    return rows


def extract_rows(content: Union[str, bytes], source_type: SourceType) -> List[List[Any]]:
    """
    Extract raw 2D data from a payload.

    Args:
        content: Raw payload
        source_type: Detected source type

    Returns:
        2D list of values (rows x columns)

    Raises:
        SourceError: If the payload cannot be read or the type is unsupported
    """
    if source_type == SourceType.CSV:
        return extract_csv_rows(content)
    elif source_type == SourceType.XLSX:
        return extract_xlsx_rows(content)
    raise SourceError(f"Unsupported file type: {source_type.value}")
