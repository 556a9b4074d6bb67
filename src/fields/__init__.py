"""
Fields module - Contains the versioned canonical field catalogs
"""

from .listing_fields import LISTING_FIELDS_V2

DEFAULT_VERSION = "listing_v2"

FIELD_DEFINITIONS = {
    "listing_v2": LISTING_FIELDS_V2,
}


def get_field_definitions(version: str = DEFAULT_VERSION):
    """
    Get the raw field definitions for a catalog version.

    Args:
        version: Catalog version (e.g., "listing_v2")

    Returns:
        List of field definition dictionaries

    Raises:
        KeyError: If the version is unknown
    """
    if version not in FIELD_DEFINITIONS:
        raise KeyError(f"Field catalog '{version}' not found.")
    return FIELD_DEFINITIONS[version]


def list_versions():
    """Return the known catalog versions."""
    return sorted(FIELD_DEFINITIONS)
