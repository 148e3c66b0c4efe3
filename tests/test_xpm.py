import pytest

from cubecaster.colors import lookup_color
from cubecaster.xpm import (
    XpmError,
    extract_strings,
    load_xpm,
    parse_xpm,
    split_words,
    strip_comments,
    text_to_rgb,
)

SIMPLE = ["2 2 3 1", "a c #FF0000", "b c blue", ". c None", "ab", "b."]


def test_split_words_on_spaces_and_tabs():
    assert split_words("  64 64\t3  1 ") == ["64", "64", "3", "1"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_extract_strings_in_order():
    assert extract_strings('static char *x[] = {\n"ab",\n"cd"};') == ["ab", "cd"]


def test_strip_comments_keeps_length_and_removes_block():
    text = 'a /* note */ "b"\n'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "note" not in result
    assert extract_strings(result) == ["b"]


def test_strip_comments_ignores_quoted_markers():
    text = '"x/*y*/" "a//b"\n'
    assert strip_comments(text) == text


def test_strip_comments_line_comment_removes_newline():
    text = '"a" // trailing\n"b"'
    result = strip_comments(text)
    assert "trailing" not in result
    assert "\n" not in result
    assert extract_strings(result) == ["a", "b"]


def test_text_to_rgb_hex():
    assert text_to_rgb("#00ff00", None) == 0x00FF00


def test_text_to_rgb_named_two_words():
    assert text_to_rgb("ghost", "white") == lookup_color("ghost white")


def test_text_to_rgb_unknown_name_is_zero():
    assert text_to_rgb("nosuchcolour", None) == 0


def test_text_to_rgb_none_is_minus_one():
    assert text_to_rgb("None", None) == -1


def test_parse_xpm_pixels():
    image = parse_xpm(SIMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == lookup_color("blue")
    assert image.get_pixel(0, 1) == lookup_color("blue")


def test_parse_xpm_transparent_pixel():
    image = parse_xpm(SIMPLE)
    assert image.get_pixel(1, 1) == 0xFF000000


def test_parse_xpm_two_chars_per_pixel():
    image = parse_xpm(["2 1 2 2", "aa c red", "bb c #0000FF", "bbaa"])
    assert image.get_pixel(0, 0) == 0x0000FF
    assert image.get_pixel(1, 0) == lookup_color("red")


def test_parse_xpm_unknown_key_is_black():
    image = parse_xpm(["1 1 1 1", "a c red", "z"])
    assert image.get_pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_load_xpm_file(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *wall[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1",\n'
        '"x c #112233",\n'
        '"y c white", // light\n'
        '"xy"\n'
        "};\n"
    )
    image = load_xpm(path)
    assert (image.width, image.height) == (2, 1)
    assert image.get_pixel(0, 0) == 0x112233
    assert image.get_pixel(1, 0) == lookup_color("white")


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")