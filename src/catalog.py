"""
Canonical field catalog.

Holds the fixed target schema every import is normalized toward. A catalog
is built once from raw field definitions, validated, and never mutated
afterwards; pipelines receive it explicitly.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from fields import DEFAULT_VERSION, get_field_definitions

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when a field catalog cannot be built."""
    pass


class DataType(Enum):
    """Expected data type of a canonical field."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    ARRAY = "array"


class FieldCategory(Enum):
    """Informational grouping of canonical fields."""
    BASIC = "basic"
    LOCATION = "location"
    FEATURES = "features"
    FINANCIAL = "financial"
    AGENT = "agent"
    MEDIA = "media"


@dataclass(frozen=True)
class CanonicalFieldDefinition:
    """
    One field of the canonical listing schema.

    Attributes:
        standard_name: Unique field identifier (e.g., "ListPrice")
        variations: Lower-cased raw header spellings; always includes the standard name
        required: Whether a record must supply this field to be complete
        data_type: Expected data type
        category: Informational grouping
    """
    standard_name: str
    variations: Tuple[str, ...]
    required: bool = False
    data_type: DataType = DataType.STRING
    category: FieldCategory = FieldCategory.BASIC

    def __post_init__(self):
        if not self.standard_name or not self.standard_name.strip():
            raise CatalogError("Field definition is missing a standard_name")
        variations = []
        for variation in (self.standard_name,) + tuple(self.variations):
            variation = str(variation).strip().lower()
            if variation and variation not in variations:
                variations.append(variation)
        object.__setattr__(self, "variations", tuple(variations))

    @classmethod
    def from_dict(cls, definition: Dict[str, Any]) -> "CanonicalFieldDefinition":
        """Build a definition from a raw catalog entry."""
        name = definition.get("standard_name")
        try:
            data_type = DataType(definition.get("data_type", "string"))
        except ValueError:
            raise CatalogError(f"Field '{name}' has unknown data_type '{definition.get('data_type')}'")
        try:
            category = FieldCategory(definition.get("category", "basic"))
        except ValueError:
            raise CatalogError(f"Field '{name}' has unknown category '{definition.get('category')}'")
        return cls(
            standard_name=name or "",
            variations=tuple(definition.get("variations", ())),
            required=bool(definition.get("required", False)),
            data_type=data_type,
            category=category,
        )


class FieldCatalog:
    """Read-only, ordered collection of canonical field definitions."""

    def __init__(self, definitions: Iterable[CanonicalFieldDefinition], version: str = "custom"):
        fields = tuple(definitions)
        by_name: Dict[str, CanonicalFieldDefinition] = {}
        for field in fields:
            if field.standard_name in by_name:
                raise CatalogError(
                    f"Duplicate standard_name '{field.standard_name}' in catalog '{version}'"
                )
            by_name[field.standard_name] = field

        self._fields = fields
        self._by_name = by_name
        self._required = tuple(f for f in fields if f.required)
        self.version = version

        logger.debug(
            f"[FieldCatalog] Loaded '{version}': {len(fields)} fields, {len(self._required)} required"
        )

    @classmethod
    def from_definitions(cls, definitions: List[Dict[str, Any]], version: str = "custom") -> "FieldCatalog":
        return cls((CanonicalFieldDefinition.from_dict(d) for d in definitions), version=version)

    def all_fields(self) -> Tuple[CanonicalFieldDefinition, ...]:
        return self._fields

    def required_fields(self) -> Tuple[CanonicalFieldDefinition, ...]:
        return self._required

    def find(self, standard_name: str) -> Optional[CanonicalFieldDefinition]:
        return self._by_name.get(standard_name)

    def __contains__(self, standard_name: object) -> bool:
        return standard_name in self._by_name

    def __iter__(self) -> Iterator[CanonicalFieldDefinition]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FieldCatalog(version={self.version!r}, fields={len(self._fields)})"


def load_catalog(version: str = None) -> FieldCatalog:
    """
    Load a bundled catalog by version.

    Args:
        version: Catalog version (default: fields.DEFAULT_VERSION)

    Returns:
        FieldCatalog

    Raises:
        CatalogError: If the version is unknown or its definitions are invalid
    """
    version = version or DEFAULT_VERSION
    try:
        definitions = get_field_definitions(version)
    except KeyError as e:
        raise CatalogError(str(e)) from e
    return FieldCatalog.from_definitions(definitions, version=version)
