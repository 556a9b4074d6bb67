"""
Header mapping.

Matches raw column headers from a listing export to canonical catalog
fields with fuzzy string similarity, producing a mapping report with
confidences, unmapped headers and missing required fields.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from catalog import CanonicalFieldDefinition, FieldCatalog
from similarity import normalize_header, similarity

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.7


@dataclass(frozen=True)
class FieldMapping:
    """
    A raw header matched to a canonical field.

    Attributes:
        input_field: Raw header as it appeared in the source file
        canonical_field: Matched canonical field
        confidence: Similarity score (0.0-1.0)
        is_required: canonical_field.required at mapping time
    """
    input_field: str
    canonical_field: CanonicalFieldDefinition
    confidence: float
    is_required: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input_field": self.input_field,
            "canonical_field": self.canonical_field.standard_name,
            "confidence": round(self.confidence, 4),
            "is_required": self.is_required,
        }


@dataclass(frozen=True)
class MappingReport:
    """
    Result of mapping one header set.

    len(mappings) + len(unmapped) always equals the number of input headers.
    """
    mappings: Tuple[FieldMapping, ...]
    unmapped: Tuple[str, ...]
    missing_required: Tuple[CanonicalFieldDefinition, ...]

    @property
    def total_headers(self) -> int:
        return len(self.mappings) + len(self.unmapped)

    def mapped_field_names(self) -> List[str]:
        """Canonical names that were claimed, in header order, without repeats."""
        names = []
        for mapping in self.mappings:
            name = mapping.canonical_field.standard_name
            if name not in names:
                names.append(name)
        return names

    def mapping_for(self, standard_name: str) -> Optional[FieldMapping]:
        """First mapping that claimed a canonical field, if any."""
        for mapping in self.mappings:
            if mapping.canonical_field.standard_name == standard_name:
                return mapping
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mappings": [m.to_dict() for m in self.mappings],
            "unmapped": list(self.unmapped),
            "missing_required": [f.standard_name for f in self.missing_required],
        }


def _score_field(normalized_header: str, field: CanonicalFieldDefinition) -> float:
    """Best similarity between a normalized header and a field's variations."""
    best = 0.0
    for variation in field.variations:
        normalized_variation = normalize_header(variation)
        if normalized_header == normalized_variation:
            return 1.0
        score = similarity(normalized_header, normalized_variation)
        if score > best:
            best = score
    return best


def find_best_field(
    header: str,
    catalog: FieldCatalog,
    exclude: Sequence[str] = (),
) -> Tuple[Optional[CanonicalFieldDefinition], float]:
    """
    Find the best-scoring canonical field for one header.

    Ties go to the field that comes first in catalog order.

    Args:
        header: Raw header
        catalog: Field catalog to search
        exclude: Standard names that may not be matched (already claimed)

    Returns:
        Tuple of (best field or None, confidence)
    """
    normalized_header = normalize_header(header)
    best_field = None
    best_confidence = 0.0

    for field in catalog:
        if field.standard_name in exclude:
            continue
        confidence = _score_field(normalized_header, field)
        if best_field is None or confidence > best_confidence:
            best_field = field
            best_confidence = confidence

    return best_field, best_confidence


def map_headers(
    headers: Sequence[Any],
    catalog: FieldCatalog,
    threshold: float = DEFAULT_THRESHOLD,
    one_to_one: bool = True,
) -> MappingReport:
    """
    Map raw column headers to canonical fields.

    Args:
        headers: Raw headers in file order
        catalog: Field catalog to map toward
        threshold: Minimum confidence for a mapping (default: 0.7)
        one_to_one: If True, a canonical field claimed by an earlier header is
            not offered to later headers (first claim wins)

    Returns:
        MappingReport
    """
    mappings: List[FieldMapping] = []
    unmapped: List[str] = []
    claimed: List[str] = []

    logger.debug(f"[map_headers] Input headers ({len(headers)}): {list(headers)}")

    for raw_header in headers:
        header = "" if raw_header is None else str(raw_header)
        field, confidence = find_best_field(header, catalog, exclude=claimed if one_to_one else ())

        if field is not None and confidence >= threshold:
            mappings.append(FieldMapping(
                input_field=header,
                canonical_field=field,
                confidence=confidence,
                is_required=field.required,
            ))
            if field.standard_name not in claimed:
                claimed.append(field.standard_name)
            logger.debug(
                f"[map_headers] MAPPED '{header}' -> {field.standard_name} ({confidence:.0%} confidence)"
            )
        else:
            unmapped.append(header)
            logger.debug(f"[map_headers] UNMAPPED '{header}' - no match above {threshold:.0%} threshold")

    missing_required = tuple(f for f in catalog.required_fields() if f.standard_name not in claimed)

    logger.info(
        f"[map_headers] Mapped: {len(mappings)}, Unmapped: {len(unmapped)}, "
        f"Missing required: {len(missing_required)}"
    )
    if missing_required:
        logger.debug(f"[map_headers] Missing required fields: {[f.standard_name for f in missing_required]}")

    return MappingReport(
        mappings=tuple(mappings),
        unmapped=tuple(unmapped),
        missing_required=missing_required,
    )


def suggest_fields(
    header: str,
    catalog: FieldCatalog,
    limit: int = 3,
) -> List[Tuple[CanonicalFieldDefinition, float]]:
    """
    Rank candidate canonical fields for a header that did not map.

    Args:
        header: Raw header
        catalog: Field catalog to search
        limit: Maximum number of suggestions (default: 3)

    Returns:
        List of (field, confidence), best first; ties keep catalog order
    """
    normalized_header = normalize_header(header)
    scored = [(field, _score_field(normalized_header, field)) for field in catalog]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return scored[:max(limit, 0)]
