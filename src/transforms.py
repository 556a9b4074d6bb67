import re
import math
from typing import Any, List, Optional, Union
from datetime import datetime

from dateutil import parser as date_parser

# Currency symbols stripped from either end of a numeric cell
CURRENCY_SYMBOLS = "$€£¥"

TRUE_VALUES = {"true", "yes", "y", "1", "x", "t"}
FALSE_VALUES = {"false", "no", "n", "0", "f"}

LIST_SEPARATORS = re.compile(r'[,;|]')

# Fill-in values for date parts missing from free-form text
DATE_DEFAULTS = (datetime(2000, 1, 1), datetime(2004, 12, 28))


def parse_number(value: Any) -> Optional[Union[int, float]]:
    """
    Parse a numeric cell.

    Strips whitespace, leading/trailing currency symbols and thousands
    separators ("$450,000" -> 450000). Returns an int when the value is
    integral, a float otherwise, or None when the value is not a finite
    number.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        num = float(value)
    else:
        cleaned = str(value).strip().strip(CURRENCY_SYMBOLS).strip()
        cleaned = cleaned.replace(',', '').replace('_', '')
        if not cleaned:
            return None
        try:
            num = float(cleaned)
        except (ValueError, TypeError):
            return None

    if not math.isfinite(num):
        return None
    return int(num) if num.is_integer() else num


def parse_date(date_str: str) -> Optional[datetime]:
    """Comprehensive date parser that handles multiple common date string formats"""
    if not date_str or not isinstance(date_str, str):
        return None

    s = date_str.strip()

    if not s:
        return None

    # Common date patterns to try in order of specificity
    patterns = [
        # ISO formats
        (r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?Z?$', '%Y-%m-%dT%H:%M:%S'),
        (r'^\d{4}-\d{2}-\d{2}$', '%Y-%m-%d'),

        # MM/DD/YYYY format
        (r'^(\d{1,2})/(\d{1,2})/(\d{4})$', None),  # Custom handler

        # MM-DD-YYYY format
        (r'^(\d{1,2})-(\d{1,2})-(\d{4})$', None),  # Custom handler

        # YYYY/MM/DD format
        (r'^(\d{4})/(\d{1,2})/(\d{1,2})$', '%Y/%m/%d'),

        # Month name formats
        (r'^(January|February|March|April|May|June|July|August|September|October|November|December|Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)\s+(\d{1,2}),?\s+(\d{4})$', '%B %d %Y'),
        (r'^(\d{1,2})\s+(January|February|March|April|May|June|July|August|September|October|November|December|Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)\s+(\d{4})$', '%d %B %Y'),

        # Shorter year formats MM/DD/YY
        (r'^(\d{1,2})/(\d{1,2})/(\d{2})$', None),  # Custom handler
    ]

    for pattern, fmt in patterns:
        match = re.match(pattern, s, re.IGNORECASE)
        if match:
            try:
                if fmt is None:
                    # Custom date parsing for ambiguous formats
                    first, second, year = match.groups()
                    first_num = int(first)
                    second_num = int(second)
                    year_num = int(year)

                    # Handle 2-digit years
                    if year_num < 100:
                        year_num = 2000 + year_num if year_num <= 30 else 1900 + year_num

                    if first_num > 12:
                        # Must be DD/MM/YYYY
                        return datetime(year_num, second_num, first_num)
                    # Assume MM/DD/YYYY (US format)
                    return datetime(year_num, first_num, second_num)

                # Drop fractional seconds / Z and the comma after the day
                candidate = re.sub(r'(\.\d+)?Z?$', '', s) if 'T' in s else s.replace(',', '')
                candidate = re.sub(r'\s+', ' ', candidate)
                for date_fmt in [fmt, fmt.replace('%B', '%b')]:
                    try:
                        return datetime.strptime(candidate, date_fmt)
                    except ValueError:
                        continue
            except (ValueError, IndexError):
                continue

    # Pure numbers are not dates
    if re.match(r'^[\d.,\s]+$', s):
        return None

    # Fall back to dateutil for anything else that reads as a date.
    # Year, month and day must all come from the text: parse against two
    # different defaults and reject the value if they disagree.
    try:
        first = date_parser.parse(s, default=DATE_DEFAULTS[0])
        second = date_parser.parse(s, default=DATE_DEFAULTS[1])
    except (ValueError, OverflowError):
        return None
    if first.date() != second.date():
        return None
    return first


def parse_boolean(value: Any) -> Optional[bool]:
    """Parse yes/no style cells; None when the text is not a recognised flag."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    text = str(value).strip().lower() if value is not None else ""
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    return None


def split_list(value: Any) -> List[str]:
    """Split a delimited cell ("a.jpg, b.jpg; c.jpg") into trimmed, non-empty items."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item).strip() for item in value if str(item).strip()]
    return [item.strip() for item in LIST_SEPARATORS.split(str(value)) if item.strip()]
