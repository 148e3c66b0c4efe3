import pytest

from cubecaster.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("thistle4", 0x8B7B8B),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1


@pytest.mark.parametrize("name", ["RED", "Red", "rEd"])
def test_lookup_ignores_case(name):
    assert lookup_color(name) == lookup_color("red")


def test_duplicate_names_resolve_to_first_entry():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("number", [0, 1, 25, 50, 99, 100])
def test_gray_and_grey_agree(number):
    assert lookup_color(f"gray{number}") == lookup_color(f"grey{number}")


def test_gray_shades_are_neutral_and_increasing():
    values = [lookup_color(f"gray{n}") for n in range(101)]
    assert values == sorted(values)
    for value in values:
        r, g, b = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
        assert r == g == b
    assert values[0] == lookup_color("black")
    assert values[100] == lookup_color("white")


def test_first_numbered_shade_matches_base_where_table_says_so():
    assert lookup_color("snow1") == lookup_color("snow")
    assert lookup_color("red1") == lookup_color("red")
    assert lookup_color("blue1") == lookup_color("blue")


def test_spaced_and_joined_names_match():
    assert lookup_color("alice blue") == lookup_color("aliceblue")
    assert lookup_color("dark grey") == lookup_color("darkgray")


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_values_fit_in_24_bits():
    for name in ("snow", "gold4", "grey73", "darkred", "midnight blue"):
        assert 0 <= lookup_color(name) <= 0xFFFFFF