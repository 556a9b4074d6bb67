from io import BytesIO

import pytest
from openpyxl import Workbook

from sources import (
    SourceError,
    SourceType,
    detect_source_type,
    extract_csv_rows,
    extract_rows,
    extract_xlsx_rows,
)


def xlsx_bytes(rows):
    workbook = Workbook()
    sheet = workbook.active
    for row in rows:
        sheet.append(row)
    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


@pytest.mark.parametrize("name,expected", [
    ("listings.csv", SourceType.CSV),
    ("LISTINGS.TXT", SourceType.CSV),
    ("listings.xlsx", SourceType.XLSX),
    ("listings.xlsm", SourceType.XLSX),
    ("listings.xls", SourceType.UNKNOWN),
    ("listings.pdf", SourceType.UNKNOWN),
])
def test_detect_by_extension(name, expected):
    assert detect_source_type(name, b"") == expected


def test_detect_by_content_without_extension():
    assert detect_source_type("upload", b"PK\x03\x04rest") == SourceType.XLSX
    assert detect_source_type("upload", b"Price\n1\n") == SourceType.CSV
    assert detect_source_type(None, "Price\n1\n") == SourceType.CSV


def test_csv_quoting_and_bom():
    content = '\ufeff"Price","Address"\n"450,000","123 Main St, Unit 4"\n'.encode("utf-8")
    assert extract_csv_rows(content) == [["Price", "Address"], ["450,000", "123 Main St, Unit 4"]]
    assert extract_csv_rows('\ufeffPrice\n1\n') == [["Price"], ["1"]]


def test_csv_undecodable_bytes():
    with pytest.raises(SourceError):
        extract_csv_rows(b"\xff\xfe\x00bad")


def test_xlsx_first_sheet():
    content = xlsx_bytes([["List Price", "City", "Notes"], [450000, "Austin", None]])
    rows = extract_xlsx_rows(content)
    assert rows[0] == ["List Price", "City", "Notes"]
    assert rows[1][0] == 450000
    assert rows[1][1] == "Austin"
    assert rows[1][2] is None


def test_xlsx_garbage_raises_source_error():
    with pytest.raises(SourceError):
        extract_xlsx_rows(b"PK\x03\x04garbage")
    with pytest.raises(SourceError):
        extract_xlsx_rows("not bytes")


def test_extract_rows_rejects_unknown_type():
    with pytest.raises(SourceError, match="Unsupported"):
        extract_rows(b"", SourceType.UNKNOWN)
