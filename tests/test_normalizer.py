import json

import pytest

from config import PipelineSettings
from normalizer import FileStatus, IngestionPipeline, UploadedFile
from test_sources import xlsx_bytes


def test_field_value_file_end_to_end(small_catalog):
    upload = UploadedFile("listing.csv", "Field,Value\nList Price,450000\nBedrooms,3\n")
    result = IngestionPipeline(small_catalog).process_file(upload)

    assert result.status == FileStatus.COMPLETED
    assert result.history == [
        FileStatus.RECEIVED,
        FileStatus.PARSED,
        FileStatus.HEADERS_MAPPED,
        FileStatus.RECORDS_VALIDATED,
        FileStatus.COMPLETED,
    ]
    assert len(result.records) == 1

    record = result.records[0]
    assert record.values["ListPrice"] == 450000
    assert record.values["Bedrooms"] == 3
    assert [e.field for e in record.validation.errors] == ["City"]
    assert record.validation.completion_percentage == 67
    assert not record.validation.is_valid
    assert record.address_components is None


def test_tabular_csv_with_address_column(listing_catalog):
    content = (
        "MLS Number,Address,City,List Price,Photos\n"
        'A12345,123 Main Street,Austin,"$450,000",a.jpg;b.jpg;c.jpg;d.jpg\n'
    )
    result = IngestionPipeline(listing_catalog).process_file(UploadedFile("listings.csv", content))

    assert result.status == FileStatus.COMPLETED
    record = result.records[0]
    assert record.row_number == 2
    assert record.values["ListPrice"] == 450000
    assert record.values["StreetNumber"] == "123"
    assert record.values["StreetName"] == "Main"
    assert record.values["StreetSuffix"] == "STREET"
    assert record.values["PhotoURLs"] == ["a.jpg", "b.jpg", "c.jpg", "d.jpg"]
    assert record.address_components.street_number == "123"

    error_fields = [e.field for e in record.validation.errors]
    assert "StreetNumber" not in error_fields
    assert "StreetName" not in error_fields
    assert "City" not in error_fields
    assert "PostalCode" in error_fields
    assert result.summary["photos_count"] == 4


def test_mapped_street_fields_win_over_address(listing_catalog):
    content = "Address,Street Number,City\n123 Main Street,500,Austin\n"
    result = IngestionPipeline(listing_catalog).process_file(UploadedFile("listings.csv", content))
    values = result.records[0].values
    assert values["StreetNumber"] == "500"
    assert values["StreetName"] == "Main"


def test_record_values_are_read_only(small_catalog):
    result = IngestionPipeline(small_catalog).process_file(UploadedFile("a.csv", "Price\n1\n"))
    with pytest.raises(TypeError):
        result.records[0].values["ListPrice"] = 2


def test_xlsx_file(listing_catalog):
    content = xlsx_bytes([
        ["List Price", "Zip Code", "City", None],
        [450000, 90210, "Beverly Hills", None],
        [None, None, None, None],
        [325000.5, 10001, "New York", None],
    ])
    result = IngestionPipeline(listing_catalog).process_file(UploadedFile("listings.xlsx", content))

    assert result.status == FileStatus.COMPLETED
    assert [r.row_number for r in result.records] == [2, 4]
    assert result.records[0].values["ListPrice"] == 450000
    assert result.records[0].values["PostalCode"] == "90210"
    assert result.records[1].values["ListPrice"] == 325000.5


def test_truncates_to_record_limit(small_catalog):
    content = "Price\n" + "".join(f"{i}\n" for i in range(1, 61))
    settings = PipelineSettings(max_records_per_file=50)
    result = IngestionPipeline(small_catalog, settings).process_file(UploadedFile("big.csv", content))

    assert result.status == FileStatus.COMPLETED
    assert len(result.records) == 50
    assert result.warnings == ["File contains 60 records; only the first 50 were processed"]


def test_unmapped_headers_get_suggestions(small_catalog):
    result = IngestionPipeline(small_catalog).process_file(UploadedFile("a.csv", "Price,Notes\n1,hi\n"))
    assert result.mapping_report.unmapped == ("Notes",)
    assert len(result.suggestions["Notes"]) == 3
    assert "Price" not in result.suggestions


@pytest.mark.parametrize("upload,reason", [
    (UploadedFile("listings.xls", b"anything"), "Unsupported file type"),
    (UploadedFile("listings.xlsx", b"PK\x03\x04garbage"), "Could not read spreadsheet"),
    (UploadedFile("listings.csv", b"\xff\xfe\x00bad"), "not valid UTF-8"),
    (UploadedFile("listings.csv", "  \n,,\n"), "file is empty"),
    (UploadedFile("listings.csv", "Price,Beds\n"), "no data rows"),
    (UploadedFile("listings.csv", "Field,Value\n"), "no data rows"),
])
def test_failed_files(small_catalog, upload, reason):
    result = IngestionPipeline(small_catalog).process_file(upload)
    assert result.status == FileStatus.FAILED
    assert reason in result.reason
    assert result.records == []
    assert result.history[-1] == FileStatus.FAILED


def test_oversized_file_fails_before_parsing(small_catalog):
    settings = PipelineSettings(max_file_size_bytes=10)
    result = IngestionPipeline(small_catalog, settings).process_file(UploadedFile("a.csv", "Price\n123456789\n"))
    assert result.status == FileStatus.FAILED
    assert "maximum size" in result.reason
    assert result.history == [FileStatus.RECEIVED, FileStatus.FAILED]


def test_batch_isolates_failures(small_catalog):
    uploads = [
        UploadedFile("bad.xlsx", b"PK\x03\x04garbage"),
        UploadedFile("good.csv", "Price,Beds,City\n1,2,Austin\n"),
    ]
    results = IngestionPipeline(small_catalog).process_batch(uploads)

    assert [r.name for r in results] == ["bad.xlsx", "good.csv"]
    assert results[0].status == FileStatus.FAILED
    assert results[0].reason
    assert results[1].status == FileStatus.COMPLETED
    assert results[1].summary["valid_records"] == 1


def test_batch_limit(small_catalog):
    settings = PipelineSettings(max_files_per_batch=1)
    uploads = [UploadedFile("a.csv", "Price\n1\n"), UploadedFile("b.csv", "Price\n2\n")]
    results = IngestionPipeline(small_catalog, settings).process_batch(uploads)
    assert results[0].status == FileStatus.COMPLETED
    assert results[1].status == FileStatus.FAILED
    assert "Batch limit" in results[1].reason


def test_threaded_batch_keeps_order(small_catalog):
    settings = PipelineSettings(max_workers=4)
    uploads = [UploadedFile(f"{i}.csv", f"Price\n{i}\n") for i in range(1, 6)]
    results = IngestionPipeline(small_catalog, settings).process_batch(uploads)
    assert [r.name for r in results] == [u.name for u in uploads]
    assert [r.records[0].values["ListPrice"] for r in results] == [1, 2, 3, 4, 5]


def test_summary_and_serialization(small_catalog):
    content = "Price,Beds,City,Photos\n1,2,Austin,a.jpg\n0,3,,\n"
    result = IngestionPipeline(small_catalog).process_file(UploadedFile("a.csv", content))

    assert result.summary == {
        "total_records": 2,
        "valid_records": 1,
        "error_records": 1,
        "average_completion": 84,
        "photos_count": 1,
    }
    warnings = [w.message for w in result.records[0].validation.warnings]
    assert "Minimum 4 photos recommended, found 1" in warnings
    assert "ListPrice must be greater than zero" in [w.message for w in result.records[1].validation.warnings]

    data = json.loads(json.dumps(result.to_dict()))
    assert data["status"] == "completed"
    assert data["records"][1]["validation"]["errors"][0]["field"] == "City"


def test_street_column_with_full_address_is_decomposed(listing_catalog):
    content = "Street,City\n123 Main St,Austin\n"
    result = IngestionPipeline(listing_catalog).process_file(UploadedFile("listings.csv", content))

    assert result.mapping_report.mapping_for("StreetName").input_field == "Street"
    record = result.records[0]
    assert record.values["StreetNumber"] == "123"
    assert record.values["StreetName"] == "Main"
    assert record.values["StreetSuffix"] == "ST"
    assert "StreetNumber" not in [e.field for e in record.validation.errors]


def test_street_column_with_street_name_only_is_kept(listing_catalog):
    content = "Street Number,Street,City\n500,Main Street,Austin\n"
    result = IngestionPipeline(listing_catalog).process_file(UploadedFile("listings.csv", content))

    record = result.records[0]
    assert record.values["StreetNumber"] == "500"
    assert record.values["StreetName"] == "Main Street"
    assert "StreetSuffix" not in record.values
    assert record.address_components is None
