import sys
from pathlib import Path

import pytest

# Add src to path
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from catalog import FieldCatalog, load_catalog  # noqa: E402


@pytest.fixture(scope="session")
def listing_catalog():
    return load_catalog()


@pytest.fixture
def small_catalog():
    """ListPrice, Bedrooms and City required; a few optional fields."""
    return FieldCatalog.from_definitions([
        {"standard_name": "ListPrice", "variations": ["list price", "price"], "required": True, "data_type": "number"},
        {"standard_name": "Bedrooms", "variations": ["bedrooms", "beds"], "required": True, "data_type": "number"},
        {"standard_name": "City", "variations": ["city", "town"], "required": True, "data_type": "string",
         "category": "location"},
        {"standard_name": "ListDate", "variations": ["list date", "listing date"], "data_type": "date"},
        {"standard_name": "PoolPrivate", "variations": ["pool"], "data_type": "boolean", "category": "features"},
        {"standard_name": "PhotoURLs", "variations": ["photos"], "data_type": "array", "category": "media"},
    ], version="test")
