import numpy as np
import pytest

from fractview.xpm import (
    XpmError,
    XpmImage,
    load_xpm_file,
    parse_xpm_lines,
    parse_xpm_text,
    strip_comments,
    text_to_rgb,
)

RED = 0xFF0000
TRANSPARENT = 0xFF000000

SMALL = ["2 2 2 1", ". c red", "# c None", ".#", "#."]

FILE_TEXT = """/* XPM */
static char *demo[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
". c red",
"# c None",
// pixels
".#",
"#."
};
"""


def test_hex_colour():
    assert text_to_rgb("#FF0000") == RED


def test_named_colour_ignores_case():
    assert text_to_rgb("RED") == text_to_rgb("red") == RED


def test_two_word_name():
    assert text_to_rgb("dark", "red") == 0x8B0000


def test_none_is_transparent_marker():
    assert text_to_rgb("None") == -1


def test_unknown_name_is_zero():
    assert text_to_rgb("nosuchcolour") == 0


def test_hex_stops_at_invalid_digit():
    assert text_to_rgb("#ffzz") == text_to_rgb("#ff")


def test_strip_block_comment_keeps_length():
    text = 'a /* note */ b'
    out = strip_comments(text)
    assert len(out) == len(text)
    assert "note" not in out
    assert out.startswith("a ") and out.endswith(" b")


def test_strip_ignores_comments_inside_quotes():
    text = '"/* kept */"'
    assert strip_comments(text) == text


def test_strip_line_comment():
    out = strip_comments('x // gone\n"y"')
    assert "gone" not in out
    assert '"y"' in out


def test_parse_lines_pixels():
    img = parse_xpm_lines(SMALL)
    assert (img.width, img.height) == (2, 2)
    assert img.pixel(0, 0) == RED
    assert img.pixel(1, 0) == TRANSPARENT
    assert img.pixel(0, 1) == TRANSPARENT
    assert img.pixel(1, 1) == RED
    assert img.pixels.shape == (2, 2)
    assert img.pixels.dtype == np.uint32


def test_text_and_lines_agree():
    from_text = parse_xpm_text(FILE_TEXT)
    from_lines = parse_xpm_lines(SMALL)
    assert np.array_equal(from_text.pixels, from_lines.pixels)


def test_load_file(tmp_path):
    path = tmp_path / "demo.xpm"
    path.write_text(FILE_TEXT)
    img = load_xpm_file(path)
    assert img.pixel(0, 0) == RED
    assert img.pixel(1, 0) == TRANSPARENT


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_xpm_file(tmp_path / "absent.xpm")


def test_short_key_last_definition_wins():
    img = parse_xpm_lines(["1 1 2 1", ". c red", ". c #00FF00", "."])
    assert img.pixel(0, 0) == text_to_rgb("#00FF00")


def test_long_key_first_definition_wins():
    img = parse_xpm_lines(["1 1 2 3", "abc c red", "abc c #00FF00", "abc"])
    assert img.pixel(0, 0) == RED


def test_multi_char_keys():
    img = parse_xpm_lines(["2 1 2 2", "aa c red", "bb c None", "bbaa"])
    assert img.pixel(0, 0) == TRANSPARENT
    assert img.pixel(1, 0) == RED


def test_unknown_pixel_key_is_zero():
    img = parse_xpm_lines(["1 1 1 1", ". c red", "x"])
    assert img.pixel(0, 0) == 0


def test_pixel_out_of_range():
    img = parse_xpm_lines(SMALL)
    with pytest.raises(IndexError):
        img.pixel(2, 0)
    with pytest.raises(IndexError):
        img.pixel(0, -1)


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", ". c red", "."],
        ["1 1 1", ". c red", "."],
        ["1 1 1 1", ". s red", "."],
        ["1 1 1 1", ". c", "."],
        ["1 1 1 1", ". c red"],
        ["2 1 1 1", ". c red", "."],
        [],
    ],
)
def test_bad_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_image_is_xpm_image():
    img = parse_xpm_text(FILE_TEXT)
    assert isinstance(img, XpmImage)
    assert img.pixels.tolist() == [[RED, TRANSPARENT], [TRANSPARENT, RED]]