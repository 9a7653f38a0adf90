import pytest

from fractview.colornames import COLOR_NAMES, lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("none", -1),
        ("ghost white", 0xF8F8FF),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_ascii_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")
    assert lookup_color("NoNe") == -1


def test_first_duplicate_entry_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_unknown_name_gives_none():
    assert lookup_color("not a colour") is None
    assert lookup_color("") is None


def test_spaced_and_joined_names_agree():
    assert lookup_color("lemon chiffon") == lookup_color("lemonchiffon")
    assert lookup_color("midnight blue") == lookup_color("midnightblue")


@pytest.mark.parametrize("level", [0, 1, 25, 50, 99, 100])
def test_gray_and_grey_spellings_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_levels_are_neutral_and_increasing():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    for value in values:
        r, g, b = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
        assert r == g == b


def test_all_values_fit_in_24_bits_except_none():
    for name, value in COLOR_NAMES.items():
        if name == "none":
            assert value == -1
        else:
            assert 0 <= value <= 0xFFFFFF


def test_table_keys_are_lower_case_and_lookup_consistent():
    for name, value in COLOR_NAMES.items():
        assert name == name.lower()
        assert lookup_color(name.upper()) == value


def test_table_is_read_only():
    with pytest.raises(TypeError):
        COLOR_NAMES["red"] = 0  # type: ignore[index]
    assert lookup_color("red") == 0xFF0000