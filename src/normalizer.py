"""
Listing ingestion pipeline.

Takes uploaded listing exports (CSV or XLSX), maps their headers to the
canonical field catalog, decomposes street addresses, validates every record
and returns one report per file.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from address import AddressComponents, decompose_address, is_address_header
from catalog import FieldCatalog
from config import PipelineSettings
from external_tables import (
    Layout,
    detect_layout,
    drop_empty_rows,
    field_value_to_object,
    non_empty_row_numbers,
    rows2d_to_objects,
)
from header_mapper import MappingReport, map_headers, suggest_fields
from schema import (
    ValidationResult,
    coerce_value,
    generate_listing_warnings,
    is_missing,
    validate_record,
)
from sources import SourceError, SourceType, detect_source_type, extract_rows
from transforms import split_list

logger = logging.getLogger(__name__)

# Canonical fields filled from a decomposed address column
ADDRESS_FIELDS = (
    ("StreetNumber", "street_number"),
    ("StreetName", "street_name"),
    ("StreetSuffix", "street_suffix"),
)


@dataclass(frozen=True)
class UploadedFile:
    """An uploaded payload: delimited text or spreadsheet bytes."""
    name: str
    content: Union[str, bytes]

    @property
    def size(self) -> int:
        if isinstance(self.content, str):
            return len(self.content.encode("utf-8"))
        return len(self.content)


class FileStatus(Enum):
    RECEIVED = "received"
    PARSED = "parsed"
    HEADERS_MAPPED = "headers_mapped"
    RECORDS_VALIDATED = "records_validated"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class NormalizedRecord:
    """
    One listing after mapping and validation.

    Attributes:
        values: Canonical field name -> typed value (read-only)
        address_components: Decomposed address column, if the file had one
        validation: Validation result for the record
        row_number: 1-based row in the source file
    """
    values: Mapping[str, Any]
    address_components: Optional[AddressComponents]
    validation: ValidationResult
    row_number: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "row_number": self.row_number,
            "values": dict(self.values),
            "address_components": self.address_components.to_dict() if self.address_components else None,
            "validation": self.validation.to_dict(),
        }


@dataclass
class FileResult:
    """Processing report for one uploaded file."""
    name: str
    status: FileStatus = FileStatus.RECEIVED
    reason: Optional[str] = None
    history: List[FileStatus] = field(default_factory=lambda: [FileStatus.RECEIVED])
    mapping_report: Optional[MappingReport] = None
    records: List[NormalizedRecord] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    suggestions: Dict[str, List[Tuple[str, float]]] = field(default_factory=dict)

    def advance(self, status: FileStatus) -> None:
        self.status = status
        self.history.append(status)

    def fail(self, reason: str) -> "FileResult":
        self.reason = reason
        self.advance(FileStatus.FAILED)
        logger.warning(f"[process_file] {self.name}: failed - {reason}")
        return self

    @property
    def summary(self) -> Dict[str, Any]:
        """Record counts, average completion and photo total for the file."""
        total = len(self.records)
        valid = sum(1 for r in self.records if r.validation.is_valid)
        average = round(sum(r.validation.completion_percentage for r in self.records) / total) if total else 0
        photos = 0
        for record in self.records:
            value = record.values.get("PhotoURLs")
            if value is not None:
                photos += len(value) if isinstance(value, list) else len(split_list(value))
        return {
            "total_records": total,
            "valid_records": valid,
            "error_records": total - valid,
            "average_completion": average,
            "photos_count": photos,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status.value,
            "reason": self.reason,
            "history": [s.value for s in self.history],
            "mapping_report": self.mapping_report.to_dict() if self.mapping_report else None,
            "records": [r.to_dict() for r in self.records],
            "warnings": list(self.warnings),
            "suggestions": {
                header: [{"field": name, "confidence": round(score, 4)} for name, score in candidates]
                for header, candidates in self.suggestions.items()
            },
            "summary": self.summary,
        }


def _typed_values(
    record: Mapping[str, Any],
    report: MappingReport,
) -> Dict[str, Any]:
    """Canonical name -> typed value; the first mapping carrying a value wins."""
    values: Dict[str, Any] = {}
    for mapping in report.mappings:
        name = mapping.canonical_field.standard_name
        if name in values:
            continue
        raw = record.get(mapping.input_field)
        if is_missing(raw):
            continue
        values[name] = coerce_value(mapping.canonical_field, raw)
    return values


def _street_fields_mapped_from(header: str, report: MappingReport) -> List[str]:
    """Street component fields a header was itself mapped to (e.g. "Street" -> StreetName)."""
    street_fields = [name for name, _ in ADDRESS_FIELDS]
    return [
        m.canonical_field.standard_name for m in report.mappings
        if m.input_field == header and m.canonical_field.standard_name in street_fields
    ]


def _derive_address(
    components: AddressComponents,
    values: Mapping[str, Any],
    catalog: FieldCatalog,
    replace: Sequence[str] = (),
) -> Dict[str, str]:
    """
    Address components for catalog fields that have no mapped value.

    Fields named in replace were mapped from the address column itself and
    take the decomposed component instead of the whole address.
    """
    derived = {}
    for standard_name, attribute in ADDRESS_FIELDS:
        component = getattr(components, attribute)
        if not component or standard_name not in catalog:
            continue
        if standard_name not in values or standard_name in replace:
            derived[standard_name] = component
    return derived


class IngestionPipeline:
    """
    Processes uploaded listing files against one field catalog.

    The catalog is immutable and may be shared between pipelines and threads.
    """

    def __init__(self, catalog: FieldCatalog, settings: Optional[PipelineSettings] = None):
        self.catalog = catalog
        self.settings = settings or PipelineSettings()

    def __repr__(self) -> str:
        return f"IngestionPipeline(catalog={self.catalog!r}, settings={self.settings!r})"

    def process_file(self, upload: UploadedFile) -> FileResult:
        """
        Parse, map and validate one uploaded file.

        Data problems never raise; they end up in the returned FileResult
        (status FAILED with a reason, or per-record validation issues).
        """
        result = FileResult(name=upload.name)
        settings = self.settings

        if upload.size > settings.max_file_size_bytes:
            return result.fail(
                f"File is {upload.size} bytes; maximum size is {settings.max_file_size_bytes} bytes"
            )

        source_type = detect_source_type(upload.name, upload.content)
        logger.debug(f"[process_file] {upload.name}: detected source type {source_type.value}")
        if source_type == SourceType.UNKNOWN:
            return result.fail("Unsupported file type; upload a CSV or XLSX file")

        try:
            raw_rows = extract_rows(upload.content, source_type)
        except SourceError as e:
            return result.fail(str(e))

        rows = drop_empty_rows(raw_rows)
        source_rows = non_empty_row_numbers(raw_rows)
        if not rows:
            return result.fail("file is empty")

        if detect_layout(rows) == Layout.FIELD_VALUE:
            headers, record = field_value_to_object(rows)
            records = [record] if headers else []
            row_numbers = source_rows[1:2]
        else:
            headers, records = rows2d_to_objects(rows)
            row_numbers = source_rows[1:]
        if not records:
            return result.fail("no data rows")
        result.advance(FileStatus.PARSED)

        if len(records) > settings.max_records_per_file:
            message = (
                f"File contains {len(records)} records; only the first "
                f"{settings.max_records_per_file} were processed"
            )
            result.warnings.append(message)
            logger.warning(f"[process_file] {upload.name}: {message}")
            records = records[:settings.max_records_per_file]

        report = map_headers(
            headers,
            self.catalog,
            threshold=settings.match_threshold,
            one_to_one=settings.one_to_one,
        )
        result.mapping_report = report
        result.advance(FileStatus.HEADERS_MAPPED)

        address_headers = [h for h in headers if is_address_header(h, settings.address_match_threshold)]
        if address_headers:
            logger.debug(f"[process_file] {upload.name}: address columns {address_headers}")

        for record, row_number in zip(records, row_numbers):
            result.records.append(self._normalize_record(record, row_number, report, address_headers))
        result.advance(FileStatus.RECORDS_VALIDATED)

        for header in report.unmapped:
            candidates = suggest_fields(header, self.catalog)
            result.suggestions[header] = [(f.standard_name, score) for f, score in candidates]

        result.advance(FileStatus.COMPLETED)
        summary = result.summary
        logger.info(
            f"[process_file] {upload.name}: {summary['total_records']} record(s), "
            f"{summary['valid_records']} valid, {summary['error_records']} with errors, "
            f"average completion {summary['average_completion']}%"
        )
        return result

    def _normalize_record(
        self,
        record: Mapping[str, Any],
        row_number: int,
        report: MappingReport,
        address_headers: Sequence[str],
    ) -> NormalizedRecord:
        values = _typed_values(record, report)

        components = None
        derived: Dict[str, str] = {}
        for header in address_headers:
            cell = record.get(header)
            if is_missing(cell):
                continue
            parsed = decompose_address(str(cell))
            own_fields = _street_fields_mapped_from(header, report)
            if own_fields and not (parsed.street_number and parsed.street_name):
                # Street column holding one component, not a full address
                continue
            components = parsed
            derived = _derive_address(components, values, self.catalog, replace=own_fields)
            break

        for name, value in derived.items():
            values[name] = coerce_value(self.catalog.find(name), value)

        validation = validate_record(
            record,
            report.mappings,
            self.catalog,
            derived=derived,
            low_confidence=self.settings.low_confidence_threshold,
        )
        validation = validation.with_warnings(
            generate_listing_warnings(values, self.catalog, min_photos=self.settings.min_photos)
        )

        return NormalizedRecord(
            values=MappingProxyType(values),
            address_components=components,
            validation=validation,
            row_number=row_number,
        )

    def process_batch(self, uploads: Sequence[UploadedFile]) -> List[FileResult]:
        """
        Process several files independently, returning results in input order.

        Files past max_files_per_batch are reported as failed without being read.
        """
        limit = self.settings.max_files_per_batch
        accepted = list(uploads[:limit])
        rejected = list(uploads[limit:])
        if rejected:
            logger.warning(f"[process_batch] {len(rejected)} file(s) over the batch limit of {limit}")

        logger.info(f"[process_batch] Processing {len(accepted)} file(s)")
        if self.settings.max_workers > 1 and len(accepted) > 1:
            with ThreadPoolExecutor(max_workers=self.settings.max_workers) as executor:
                results = list(executor.map(self.process_file, accepted))
        else:
            results = [self.process_file(upload) for upload in accepted]

        for upload in rejected:
            results.append(FileResult(name=upload.name).fail(
                f"Batch limit exceeded; at most {limit} files can be uploaded at once"
            ))
        return results


if __name__ == "__main__":
    from catalog import load_catalog
    from config import configure_logging

    configure_logging()

    demo_csv = (
        "MLS #,Address,City,List Price,Beds,Baths,Photos\n"
        'A12345,123 Main Street,Austin,"$450,000",3,2,a.jpg;b.jpg\n'
        "B67890,9 Elm St,,not listed,4,3,\n"
    )
    pipeline = IngestionPipeline(load_catalog())
    result = pipeline.process_file(UploadedFile("demo.csv", demo_csv))

    print("Mappings:")
    for mapping in result.mapping_report.mappings:
        print(f"  {mapping.input_field!r} -> {mapping.canonical_field.standard_name} ({mapping.confidence:.0%})")
    print(f"Unmapped: {list(result.mapping_report.unmapped)}")

    for record in result.records:
        print(f"\nRow {record.row_number}: {dict(record.values)}")
        print(f"  completion: {record.validation.completion_percentage}%")
        for issue in record.validation.errors + record.validation.warnings:
            print(f"  [{issue.severity.value}] {issue.message}")

    print(f"\nSummary: {result.summary}")
