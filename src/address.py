"""
Street address decomposition.

Splits a free-form street address ("123 Main Street") into street number,
street name and street suffix using the USPS street suffix list.
"""

import re
import logging
from dataclasses import dataclass

from similarity import normalize_header, similarity

logger = logging.getLogger(__name__)

# Digits optionally followed by one letter: "123", "123A"
STREET_NUMBER_PATTERN = re.compile(r'^[0-9]+[A-Za-z]?$')

# USPS street suffixes (full names and official abbreviations)
STREET_SUFFIXES = frozenset([
    'ALLEY', 'ALY', 'AVENUE', 'AVE', 'BOULEVARD', 'BLVD', 'CIRCLE', 'CIR', 'COURT', 'CT', 'COVE', 'CV',
    'CREEK', 'CRK', 'DRIVE', 'DR', 'LANE', 'LN', 'PARKWAY', 'PKWY', 'PLACE', 'PL', 'PLAZA', 'PLZ',
    'ROAD', 'RD', 'SQUARE', 'SQ', 'STREET', 'ST', 'TERRACE', 'TER', 'TRAIL', 'TRL', 'WAY', 'WY',
    'BEND', 'BND', 'BRANCH', 'BR', 'BRIDGE', 'BRG', 'BROOK', 'BRK', 'BURG', 'BG', 'BYPASS', 'BYP',
    'CAMP', 'CP', 'CANYON', 'CYN', 'CAPE', 'CPE', 'CAUSEWAY', 'CSWY', 'CENTER', 'CTR', 'CENTERS', 'CTRS',
    'CLIFFS', 'CLFS', 'CLUB', 'CLB', 'COMMON', 'CMN', 'COMMONS', 'CMNS', 'CORNER', 'COR', 'CORNERS', 'CORS',
    'COURSE', 'CRSE', 'COURTS', 'CTS', 'COVES', 'CVS', 'CRESCENT', 'CRES', 'CROSSING', 'XING', 'CROSSROAD', 'XRD',
    'CURVE', 'CURV', 'DALE', 'DL', 'DAM', 'DM', 'DIVIDE', 'DV', 'ESTATE', 'EST', 'ESTATES', 'ESTS',
    'EXPRESSWAY', 'EXPY', 'EXTENSION', 'EXT', 'EXTENSIONS', 'EXTS', 'FALL', 'FALLS', 'FLS', 'FERRY', 'FRY',
    'FIELD', 'FLD', 'FIELDS', 'FLDS', 'FLAT', 'FLT', 'FLATS', 'FLTS', 'FORD', 'FRD', 'FORDS', 'FRDS',
    'FOREST', 'FRST', 'FORGE', 'FRG', 'FORGES', 'FRGS', 'FORK', 'FRK', 'FORKS', 'FRKS', 'FORT', 'FT',
    'FREEWAY', 'FWY', 'GARDEN', 'GDN', 'GARDENS', 'GDNS', 'GATEWAY', 'GTWY', 'GLEN', 'GLN', 'GLENS', 'GLNS',
    'GREEN', 'GRN', 'GREENS', 'GRNS', 'GROVE', 'GRV', 'GROVES', 'GRVS', 'HARBOR', 'HBR', 'HARBORS', 'HBRS',
    'HAVEN', 'HVN', 'HEIGHTS', 'HTS', 'HIGHWAY', 'HWY', 'HILL', 'HL', 'HILLS', 'HLS', 'HOLLOW', 'HOLW',
    'INLET', 'INLT', 'ISLAND', 'IS', 'ISLANDS', 'ISS', 'ISLE', 'JUNCTION', 'JCT', 'JUNCTIONS', 'JCTS',
    'KEY', 'KY', 'KEYS', 'KYS', 'KNOLL', 'KNL', 'KNOLLS', 'KNLS', 'LAKE', 'LK', 'LAKES', 'LKS',
    'LAND', 'LANDING', 'LNDG', 'LIGHT', 'LGT', 'LIGHTS', 'LGTS', 'LOAF', 'LF', 'LOCK', 'LCK',
    'LOCKS', 'LCKS', 'LODGE', 'LDG', 'LOOP', 'MANOR', 'MNR', 'MANORS', 'MNRS', 'MEADOW', 'MDW',
    'MEADOWS', 'MDWS', 'MEWS', 'MILL', 'ML', 'MILLS', 'MLS', 'MISSION', 'MSN', 'MOTORWAY', 'MTWY',
    'MOUNT', 'MT', 'MOUNTAIN', 'MTN', 'MOUNTAINS', 'MTNS', 'NECK', 'NCK', 'ORCHARD', 'ORCH', 'OVAL', 'OVL',
    'OVERPASS', 'OPAS', 'PARK', 'PARKS', 'PASS', 'PASSAGE', 'PSGE', 'PATH', 'PIKE', 'PINE', 'PNE',
    'PINES', 'PNES', 'PLAIN', 'PLN', 'PLAINS', 'PLNS', 'POINT', 'PT', 'POINTS', 'PTS', 'PORT', 'PRT',
    'PORTS', 'PRTS', 'PRAIRIE', 'PR', 'RADIAL', 'RADL', 'RAMP', 'RANCH', 'RNCH', 'RAPID', 'RPD',
    'RAPIDS', 'RPDS', 'REST', 'RST', 'RIDGE', 'RDG', 'RIDGES', 'RDGS', 'RIVER', 'RIV', 'ROADS', 'RDS',
    'ROUTE', 'RTE', 'ROW', 'RUE', 'RUN', 'SHOAL', 'SHL', 'SHOALS', 'SHLS', 'SHORE', 'SHR', 'SHORES', 'SHRS',
    'SKYWAY', 'SKWY', 'SPRING', 'SPG', 'SPRINGS', 'SPGS', 'SPUR', 'SPURS', 'STATION', 'STA', 'STRAVENUE', 'STRA',
    'STREAM', 'STRM', 'SUMMIT', 'SMT', 'THROUGHWAY', 'TRWY', 'TRACE', 'TRCE', 'TRACK', 'TRAK', 'TRAFFICWAY', 'TRFY',
    'TUNNEL', 'TUNL', 'TURNPIKE', 'TPKE', 'UNDERPASS', 'UPAS', 'UNION', 'UN', 'UNIONS', 'UNS', 'VALLEY', 'VLY',
    'VALLEYS', 'VLYS', 'VIADUCT', 'VIA', 'VIEW', 'VW', 'VIEWS', 'VWS', 'VILLAGE', 'VLG', 'VILLAGES', 'VLGS',
    'VILLE', 'VL', 'VISTA', 'VIS', 'WALK', 'WALKS', 'WALL', 'WELL', 'WL', 'WELLS', 'WLS',
])

# Headers whose column may hold a whole street address
ADDRESS_HEADERS = [
    "address",
    "street",
    "street address",
    "property address",
    "full address",
    "site address",
    "location",
]


@dataclass(frozen=True)
class AddressComponents:
    """Structured street address."""
    street_number: str = ""
    street_name: str = ""
    street_suffix: str = ""

    def is_empty(self) -> bool:
        return not (self.street_number or self.street_name or self.street_suffix)

    def to_dict(self):
        return {
            "streetNumber": self.street_number,
            "streetName": self.street_name,
            "streetSuffix": self.street_suffix,
        }


def decompose_address(full_address: str) -> AddressComponents:
    """
    Parse a street address into number, name and suffix.

    Args:
        full_address: Free-form street address (e.g., "123 Main Street")

    Returns:
        AddressComponents; all empty for empty or blank input
    """
    parts = (full_address or "").split()
    if not parts:
        return AddressComponents()

    street_number = ""
    if STREET_NUMBER_PATTERN.match(parts[0]):
        street_number = parts[0]
        parts = parts[1:]

    street_suffix = ""
    if parts and parts[-1].upper() in STREET_SUFFIXES:
        street_suffix = parts[-1].upper()
        parts = parts[:-1]

    components = AddressComponents(
        street_number=street_number,
        street_name=" ".join(parts),
        street_suffix=street_suffix,
    )
    logger.debug(
        f"[decompose_address] '{full_address}' -> number='{components.street_number}', "
        f"name='{components.street_name}', suffix='{components.street_suffix}'"
    )
    return components


def is_address_header(header: str, threshold: float = 0.7) -> bool:
    """
    Check whether a header names a column that may hold a whole street address.

    Headers mentioning email are never address columns ("Email Address").
    """
    normalized = normalize_header(header)
    if not normalized or "email" in normalized:
        return False
    return any(similarity(normalized, candidate) >= threshold for candidate in ADDRESS_HEADERS)
