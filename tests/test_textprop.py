import pytest

from xutilkit.textprop import (
    XA_STRING,
    WELL_KNOWN_ATOMS,
    TextProperty,
    string_list_to_text_property,
    text_property_to_string_list,
)


def test_join_uses_nul_separators():
    prop = string_list_to_text_property(["ab", "cd"])
    assert prop.value == b"ab\0cd"
    assert prop.nitems == len(b"ab\0cd")
    assert prop.encoding == XA_STRING
    assert prop.format == 8


def test_string_atom_is_predefined_value():
    prop = string_list_to_text_property(["x"])
    assert prop.encoding == 31


def test_empty_list_gives_empty_property():
    prop = string_list_to_text_property([])
    assert prop.value == b""
    assert prop.nitems == 0


def test_none_entries_are_empty():
    prop = string_list_to_text_property(["a", None, "b"])
    assert prop.value == b"a\0\0b"
    assert text_property_to_string_list(prop) == ["a", "", "b"]


@pytest.mark.parametrize(
    "strings",
    [["one"], ["one", "two", "three"], ["", "x"], ["x", ""], ["caf\u00e9", "na\u00efve"]],
)
def test_round_trip(strings):
    prop = string_list_to_text_property(strings)
    assert text_property_to_string_list(prop) == strings


def test_single_empty_string_round_trips_to_empty_list():
    prop = string_list_to_text_property([""])
    assert prop.nitems == 0
    assert text_property_to_string_list(prop) == []


def test_bytes_input_accepted():
    prop = string_list_to_text_property([b"abc", "def"])
    assert text_property_to_string_list(prop) == ["abc", "def"]


def test_nitems_limits_data():
    prop = TextProperty(value=b"abc\0def\0ghi", nitems=7)
    assert text_property_to_string_list(prop) == ["abc", "def"]


def test_default_nitems_is_length():
    prop = TextProperty(value=b"abc")
    assert prop.nitems == 3


def test_wrong_encoding_rejected():
    prop = TextProperty(value=b"abc", encoding=XA_STRING + 1)
    with pytest.raises(ValueError):
        text_property_to_string_list(prop)


def test_wrong_format_rejected():
    prop = TextProperty(value=b"abc", format=16)
    with pytest.raises(ValueError):
        text_property_to_string_list(prop)


def test_well_known_atoms_round_trip_through_property():
    names = list(WELL_KNOWN_ATOMS)
    prop = string_list_to_text_property(names)
    decoded = text_property_to_string_list(prop)
    assert "WM_PROTOCOLS" in decoded
    assert "UTF8_STRING" in decoded
    assert decoded == names