import pytest

from xutilkit.colors import ColorEntry, color_names, lookup_color


def test_lookup_exact_name():
    entry = lookup_color("alice blue")
    assert entry == ColorEntry("alice blue", 240, 248, 255)


def test_lookup_ignores_case():
    assert lookup_color("aliceblue").rgb == lookup_color("AliceBlue").rgb
    assert lookup_color("ALICEBLUE").name == "AliceBlue"


def test_lookup_source_values():
    assert lookup_color("RebeccaPurple").rgb == (102, 51, 153)
    assert lookup_color("black").rgb == (0, 0, 0)
    assert lookup_color("white").hex == "#ffffff"


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("no such colour")


def test_spaces_are_significant():
    with pytest.raises(KeyError):
        lookup_color("alice  blue")


def test_names_order_and_bounds():
    names = color_names()
    assert names[0] == "alice blue"
    assert names[-1] == "YellowGreen"


def test_every_name_resolves_to_itself():
    for name in color_names():
        entry = lookup_color(name)
        assert entry.name == name
        assert all(0 <= c <= 255 for c in entry.rgb)


def test_names_unique_without_case():
    names = color_names()
    assert len({n.casefold() for n in names}) == len(names)


def test_gray_and_grey_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}").rgb == lookup_color(f"grey{level}").rgb


def test_gray_levels_are_neutral_and_increasing():
    values = [lookup_color(f"gray{level}").red for level in range(101)]
    assert values == sorted(values)
    for level in range(101):
        entry = lookup_color(f"gray{level}")
        assert entry.red == entry.green == entry.blue


def test_spaced_and_camel_names_agree():
    assert lookup_color("dark slate gray").rgb == lookup_color("DarkSlateGray").rgb
    assert lookup_color("navy blue").rgb == lookup_color("NavyBlue").rgb


def test_hex_round_trip():
    for name in color_names():
        entry = lookup_color(name)
        text = entry.hex
        assert (int(text[1:3], 16), int(text[3:5], 16), int(text[5:7], 16)) == entry.rgb