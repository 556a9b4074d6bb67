import pytest

from similarity import levenshtein_distance, normalize_header, similarity


def test_levenshtein_distance_kitten_sitting():
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("", "abc") == 3
    assert levenshtein_distance("abc", "abc") == 0


def test_similarity_kitten_sitting():
    assert similarity("kitten", "sitting") == pytest.approx(4 / 7)


@pytest.mark.parametrize("value", ["price", "List Price", "a", "sq ft"])
def test_similarity_identity(value):
    assert similarity(value, value) == 1.0


@pytest.mark.parametrize("a,b", [("beds", "bedrooms"), ("City", "county"), ("", "price"), ("abc", "xyz")])
def test_similarity_is_symmetric(a, b):
    assert similarity(a, b) == similarity(b, a)


def test_similarity_ignores_case_but_not_whitespace():
    assert similarity("LIST PRICE", "list price") == 1.0
    assert similarity(" a", "a") == 0.5
    assert similarity("price ", "price") == pytest.approx(5 / 6)


def test_similarity_bounds():
    assert similarity("abc", "xyz") == 0.0
    assert similarity("", "") == 1.0
    assert 0.0 <= similarity("bath", "baths") <= 1.0


def test_normalize_header_collapses_separators():
    assert normalize_header("List_Price ") == "list price"
    assert normalize_header("list-price") == "list price"
    assert normalize_header("List  .  Price") == "list price"
    assert normalize_header("Lot/Acres") == "lot acres"
    assert normalize_header("") == ""
    assert normalize_header(None) == ""
