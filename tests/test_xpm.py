import pytest

from sollong.colors import lookup_color, text_to_rgb
from sollong.xpm import (
    TRANSPARENT,
    XpmError,
    load_xpm,
    parse_xpm,
    quoted_lines,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1 ",
"  c None",
". c #FF0000",
"x c red",
" .x",
"x. ",
};
"""

SAMPLE_LINES = ["3 2 3 1 ", "  c None", ". c #FF0000", "x c red", " .x", "x. "]


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    return path


def test_load_dimensions(sample_file):
    image = load_xpm(sample_file)
    assert (image.width, image.height) == (3, 2)
    assert len(image.pixels) == 6


def test_none_is_transparent(sample_file):
    image = load_xpm(sample_file)
    assert image.pixel(0, 0) == 0xFF000000
    assert image.pixel(2, 1) == TRANSPARENT


def test_hex_and_named_colours(sample_file):
    image = load_xpm(sample_file)
    assert image.pixel(1, 0) == text_to_rgb("#FF0000")
    assert image.pixel(2, 0) == lookup_color("red")
    assert image.pixel(0, 1) == image.pixel(2, 0)


def test_file_and_static_data_agree(sample_file):
    assert load_xpm(sample_file) == parse_xpm(SAMPLE_LINES)


def test_pixel_out_of_range():
    image = parse_xpm(SAMPLE_LINES)
    with pytest.raises(IndexError):
        image.pixel(3, 0)


def test_strip_comments_keeps_quoted_text():
    text = '"a/*b" /* c */ d'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.split() == ['"a/*b"', "d"]


def test_strip_line_comment():
    text = '"x" // note\n"y"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert list(quoted_lines(result)) == ["x", "y"]


def test_quoted_lines():
    assert list(quoted_lines('junk "a" more "b c" "unterminated')) == ["a", "b c"]


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 2", "aa c red", "aa c blue", "aa"])
    assert image.pixel(0, 0) == lookup_color("blue")


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "aaa c red", "aaa c blue", "aaa"])
    assert image.pixel(0, 0) == lookup_color("red")


def test_unknown_key_is_black():
    image = parse_xpm(["2 1 1 1", "a c red", "ab"])
    assert image.pixel(0, 0) == lookup_color("red")
    assert image.pixel(1, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a m red", "a"],
        ["1 1 1 1", "a c"],
        ["1 2 1 1", "a c red", "a"],
        [],
    ],
)
def test_malformed_data(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")