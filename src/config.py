"""
Configuration module for loading environment variables.

This module loads environment variables from .env file and exposes
configuration values for header matching, upload limits and logging.
"""

import os
import logging
from dataclasses import dataclass
from dotenv import load_dotenv
load_dotenv()

# Header matching
MATCH_THRESHOLD = float(os.getenv("MATCH_THRESHOLD", "0.7"))
MAPPING_POLICY = os.getenv("MAPPING_POLICY", "one_to_one").strip().lower()
LOW_CONFIDENCE_THRESHOLD = float(os.getenv("LOW_CONFIDENCE_THRESHOLD", "0.9"))
ADDRESS_MATCH_THRESHOLD = float(os.getenv("ADDRESS_MATCH_THRESHOLD", "0.7"))

# Upload limits (10 MB, 10 files, 50 listings)
MAX_FILE_SIZE_BYTES = int(os.getenv("MAX_FILE_SIZE_BYTES", str(10 * 1024 * 1024)))
MAX_FILES_PER_BATCH = int(os.getenv("MAX_FILES_PER_BATCH", "10"))
MAX_RECORDS_PER_FILE = int(os.getenv("MAX_RECORDS_PER_FILE", "50"))
MAX_WORKERS = int(os.getenv("MAX_WORKERS", "1"))

# Listing quality rules
MIN_PHOTOS = int(os.getenv("MIN_PHOTOS", "4"))

CATALOG_VERSION = os.getenv("CATALOG_VERSION", "listing_v2")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

MAPPING_POLICIES = ("one_to_one", "many_to_one")


class ConfigError(ValueError):
    """Raised when pipeline settings are out of range."""
    pass


def configure_logging(level: str = None) -> None:
    """Configure root logging once, using LOG_LEVEL unless a level is given."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@dataclass(frozen=True)
class PipelineSettings:
    """
    Settings for one ingestion pipeline.

    Attributes:
        match_threshold: Minimum header similarity for a mapping (0.0-1.0)
        mapping_policy: "one_to_one" (a canonical field can be claimed by one header only)
            or "many_to_one"
        low_confidence_threshold: Mappings below this confidence produce a warning
        address_match_threshold: Similarity needed for a header to count as an address column
        max_file_size_bytes: Larger payloads fail without being parsed
        max_files_per_batch: Files past this position in a batch fail
        max_records_per_file: Records past this count are truncated with a warning
        max_workers: Thread count for batch processing (1 = sequential)
        min_photos: Fewest photo URLs before a listing gets a warning
    """
    match_threshold: float = MATCH_THRESHOLD
    mapping_policy: str = MAPPING_POLICY
    low_confidence_threshold: float = LOW_CONFIDENCE_THRESHOLD
    address_match_threshold: float = ADDRESS_MATCH_THRESHOLD
    max_file_size_bytes: int = MAX_FILE_SIZE_BYTES
    max_files_per_batch: int = MAX_FILES_PER_BATCH
    max_records_per_file: int = MAX_RECORDS_PER_FILE
    max_workers: int = MAX_WORKERS
    min_photos: int = MIN_PHOTOS

    def __post_init__(self):
        if self.mapping_policy not in MAPPING_POLICIES:
            raise ConfigError(
                f"MAPPING_POLICY must be one of {', '.join(MAPPING_POLICIES)}, got '{self.mapping_policy}'"
            )
        for name in ("match_threshold", "low_confidence_threshold", "address_match_threshold"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} must be between 0 and 1, got {value}")
        for name in ("max_file_size_bytes", "max_files_per_batch", "max_records_per_file", "max_workers"):
            value = getattr(self, name)
            if value < 1:
                raise ConfigError(f"{name} must be a positive integer, got {value}")
        if self.min_photos < 0:
            raise ConfigError(f"min_photos cannot be negative, got {self.min_photos}")

    @property
    def one_to_one(self) -> bool:
        return self.mapping_policy == "one_to_one"

    @classmethod
    def from_env(cls) -> "PipelineSettings":
        """Build settings from the environment-backed module constants."""
        return cls(
            match_threshold=MATCH_THRESHOLD,
            mapping_policy=MAPPING_POLICY,
            low_confidence_threshold=LOW_CONFIDENCE_THRESHOLD,
            address_match_threshold=ADDRESS_MATCH_THRESHOLD,
            max_file_size_bytes=MAX_FILE_SIZE_BYTES,
            max_files_per_batch=MAX_FILES_PER_BATCH,
            max_records_per_file=MAX_RECORDS_PER_FILE,
            max_workers=MAX_WORKERS,
            min_photos=MIN_PHOTOS,
        )
