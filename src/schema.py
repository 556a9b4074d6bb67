"""
Record validation utilities.

Validates one raw listing record against its header mappings and the
canonical catalog: required-field presence, per-type checks and the
completion percentage.
"""

import math
import logging
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from catalog import CanonicalFieldDefinition, DataType, FieldCatalog
from header_mapper import FieldMapping
from transforms import parse_boolean, parse_date, parse_number, split_list

logger = logging.getLogger(__name__)


# ============================================================================
# Raw cell values
# ============================================================================

@dataclass(frozen=True)
class TextValue:
    text: str


@dataclass(frozen=True)
class NumberValue:
    number: Union[int, float]


@dataclass(frozen=True)
class MissingValue:
    pass


RawValue = Union[TextValue, NumberValue, MissingValue]

MISSING = MissingValue()


def to_raw_value(cell: Any) -> RawValue:
    """
    Classify a parsed cell.

    None, NaN and whitespace-only strings are missing; numbers stay numbers;
    dates become ISO text; everything else becomes text.
    """
    if isinstance(cell, (TextValue, NumberValue, MissingValue)):
        return cell
    if cell is None:
        return MISSING
    if isinstance(cell, bool):
        return TextValue("true" if cell else "false")
    if isinstance(cell, (int, float)):
        if isinstance(cell, float) and math.isnan(cell):
            return MISSING
        return NumberValue(cell)
    if isinstance(cell, (datetime, date)):
        return TextValue(cell.isoformat())
    text = str(cell)
    if not text.strip():
        return MISSING
    return TextValue(text)


def is_missing(cell: Any) -> bool:
    return isinstance(to_raw_value(cell), MissingValue)


# ============================================================================
# Validation results
# ============================================================================

class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationIssue:
    """A missing value, type mismatch or data quality note for one field."""
    field: str
    message: str
    severity: Severity = Severity.ERROR

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message, "severity": self.severity.value}


@dataclass(frozen=True)
class ValidationResult:
    errors: Tuple[ValidationIssue, ...]
    warnings: Tuple[ValidationIssue, ...]
    completion_percentage: int

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def with_warnings(self, extra: Sequence[ValidationIssue]) -> "ValidationResult":
        """Copy of this result with additional warnings appended."""
        if not extra:
            return self
        return ValidationResult(
            errors=self.errors,
            warnings=self.warnings + tuple(extra),
            completion_percentage=self.completion_percentage,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
            "completion_percentage": self.completion_percentage,
        }


def completion_percentage(present: int, total: int) -> int:
    """Share of required fields present, rounded half up; 100 when nothing is required."""
    if total <= 0:
        return 100
    return int(100 * present / total + 0.5)


def _type_issue(field: CanonicalFieldDefinition, raw: RawValue) -> Optional[ValidationIssue]:
    """Type check one present value against the field's data type."""
    name = field.standard_name

    if field.data_type == DataType.NUMBER:
        value = raw.number if isinstance(raw, NumberValue) else raw.text
        if parse_number(value) is None:
            return ValidationIssue(name, f"{name} must be a number", Severity.ERROR)

    elif field.data_type == DataType.DATE:
        if isinstance(raw, NumberValue) or parse_date(raw.text) is None:
            return ValidationIssue(name, f"{name} should be a valid date", Severity.WARNING)

    # string, array and boolean: presence is enough
    return None


def _mapped_values(
    record: Mapping[str, Any],
    mappings: Sequence[FieldMapping],
) -> Dict[str, RawValue]:
    """
    Canonical name -> first present raw value among the mappings that claim it.

    Fields that are mapped but empty are recorded as missing.
    """
    values: Dict[str, RawValue] = {}
    for mapping in mappings:
        name = mapping.canonical_field.standard_name
        raw = to_raw_value(record.get(mapping.input_field))
        if name not in values or isinstance(values[name], MissingValue):
            values[name] = raw
    return values


def validate_record(
    record: Mapping[str, Any],
    mappings: Sequence[FieldMapping],
    catalog: FieldCatalog,
    derived: Optional[Mapping[str, Any]] = None,
    low_confidence: float = 0.9,
) -> ValidationResult:
    """
    Validate one raw record.

    Args:
        record: Raw row keyed by input header
        mappings: Header mappings for the record's file
        catalog: Catalog the mappings point into
        derived: Canonical-name keyed values produced outside the mapped
            columns (e.g. street components parsed from an address column);
            used only for fields no mapping supplies a value for
        low_confidence: Mappings below this confidence produce a warning

    Returns:
        ValidationResult
    """
    errors: List[ValidationIssue] = []
    warnings: List[ValidationIssue] = []

    values = _mapped_values(record, mappings)
    derived_values: Dict[str, RawValue] = {}
    for name, cell in (derived or {}).items():
        if name in catalog and isinstance(values.get(name, MISSING), MissingValue):
            derived_values[name] = to_raw_value(cell)
    values.update(derived_values)

    # Required field presence
    required = catalog.required_fields()
    present_required = 0
    for field in required:
        if isinstance(values.get(field.standard_name, MISSING), MissingValue):
            errors.append(ValidationIssue(
                field.standard_name,
                f"{field.standard_name} is required but missing",
                Severity.ERROR,
            ))
        else:
            present_required += 1

    # Data types, for every mapped column and every derived value
    checks = [(m.canonical_field, to_raw_value(record.get(m.input_field))) for m in mappings]
    checks.extend((catalog.find(name), raw) for name, raw in derived_values.items())
    for field, raw in checks:
        if isinstance(raw, MissingValue):
            continue
        issue = _type_issue(field, raw)
        if issue is None:
            continue
        if issue.severity == Severity.ERROR:
            errors.append(issue)
        else:
            warnings.append(issue)

    # Mapping confidence
    for mapping in mappings:
        if mapping.confidence < low_confidence:
            warnings.append(ValidationIssue(
                mapping.canonical_field.standard_name,
                f"Field mapping confidence is {round(mapping.confidence * 100)}% for "
                f"{mapping.input_field} -> {mapping.canonical_field.standard_name}",
                Severity.WARNING,
            ))

    result = ValidationResult(
        errors=tuple(errors),
        warnings=tuple(warnings),
        completion_percentage=completion_percentage(present_required, len(required)),
    )
    logger.debug(
        f"[validate_record] errors={len(result.errors)}, warnings={len(result.warnings)}, "
        f"completion={result.completion_percentage}%"
    )
    return result


def coerce_value(field: CanonicalFieldDefinition, raw: Any) -> Any:
    """
    Convert a present raw value to the field's data type.

    Values that do not convert are kept as trimmed text so they can be shown
    for correction. Missing values return None.
    """
    raw = to_raw_value(raw)
    if isinstance(raw, MissingValue):
        return None

    if field.data_type == DataType.NUMBER:
        value = raw.number if isinstance(raw, NumberValue) else raw.text
        number = parse_number(value)
        return number if number is not None else str(value).strip()

    if isinstance(raw, NumberValue):
        if field.data_type == DataType.BOOLEAN and raw.number in (0, 1):
            return bool(raw.number)
        if field.data_type == DataType.ARRAY:
            return [_number_text(raw.number)]
        return _number_text(raw.number)

    text = raw.text.strip()
    if field.data_type == DataType.DATE:
        parsed = parse_date(text)
        return parsed.date().isoformat() if parsed else text
    if field.data_type == DataType.BOOLEAN:
        flag = parse_boolean(text)
        return flag if flag is not None else text
    if field.data_type == DataType.ARRAY:
        return split_list(text)
    return text


def _number_text(number: Union[int, float]) -> str:
    """Spreadsheet numbers read into text fields ("90210.0" -> "90210")."""
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def generate_listing_warnings(
    values: Mapping[str, Any],
    catalog: FieldCatalog,
    min_photos: int = 4,
) -> List[ValidationIssue]:
    """
    Generate listing data quality warnings for typed record values.
    Only checks fields the catalog defines.
    """
    warnings = []

    # List price must be positive
    price = values.get("ListPrice")
    if "ListPrice" in catalog and isinstance(price, (int, float)) and not isinstance(price, bool):
        if price <= 0:
            warnings.append(ValidationIssue(
                "ListPrice", "ListPrice must be greater than zero", Severity.WARNING,
            ))

    # MLS number sanity check
    mls_number = values.get("MLSNumber")
    if "MLSNumber" in catalog and mls_number is not None and str(mls_number).strip():
        if len(str(mls_number).strip()) < 3:
            warnings.append(ValidationIssue(
                "MLSNumber", "MLSNumber appears to be too short (minimum 3 characters)", Severity.WARNING,
            ))

    # Photo count
    photos = values.get("PhotoURLs")
    if "PhotoURLs" in catalog and photos is not None:
        count = len(photos) if isinstance(photos, list) else len(split_list(photos))
        if count < min_photos:
            warnings.append(ValidationIssue(
                "PhotoURLs", f"Minimum {min_photos} photos recommended, found {count}", Severity.WARNING,
            ))

    return warnings
