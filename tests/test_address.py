import pytest

from address import AddressComponents, decompose_address, is_address_header


def test_decompose_full_address():
    assert decompose_address("123 Main Street") == AddressComponents("123", "Main", "STREET")


def test_decompose_empty_and_blank():
    assert decompose_address("") == AddressComponents()
    assert decompose_address("   ") == AddressComponents()
    assert decompose_address(None).is_empty()


def test_decompose_name_only():
    assert decompose_address("Broadway") == AddressComponents("", "Broadway", "")


def test_decompose_number_with_letter_and_abbreviated_suffix():
    assert decompose_address("123A Old Mill Rd") == AddressComponents("123A", "Old Mill", "RD")


def test_decompose_collapses_whitespace():
    components = decompose_address("  42   Martin  Luther King   Blvd ")
    assert components.street_number == "42"
    assert components.street_name == "Martin Luther King"
    assert components.street_suffix == "BLVD"


def test_decompose_suffix_only_after_number():
    # The last token is the suffix even when nothing is left for the name
    assert decompose_address("12 Way") == AddressComponents("12", "", "WAY")


def test_to_dict_uses_component_names():
    assert decompose_address("9 Elm St").to_dict() == {
        "streetNumber": "9",
        "streetName": "Elm",
        "streetSuffix": "ST",
    }


@pytest.mark.parametrize("header", ["Address", "Street", "Street Address", "property_address", "Full Address", "Location"])
def test_address_headers(header):
    assert is_address_header(header)


@pytest.mark.parametrize("header", ["Email Address", "City", "List Price", "", "Street Number", "Street Name", "State"])
def test_non_address_headers(header):
    assert not is_address_header(header)


def test_street_number_is_ascii_digits_only():
    components = decompose_address("١٢٣ Main St")
    assert components.street_number == ""
    assert components.street_name == "١٢٣ Main"
    assert components.street_suffix == "ST"
