import pytest

from modmail_embeds.util.parsing_utils import parse_color, parse_custom_boolean


def test_parse_color_short_and_long_hex_match():
    assert parse_color("#fff") == parse_color("#ffffff") == 16777215


def test_parse_color_short_hex_expands_each_digit():
    assert parse_color("#2ec") == parse_color("#22eecc") == 0x22EECC


def test_parse_color_hex_is_case_insensitive():
    assert parse_color("#2ECC71") == parse_color("#2ecc71") == 3066993


@pytest.mark.parametrize("value", ["100,100,100", "100 100 100", "100, 100, 100", "100;100/100"])
def test_parse_color_rgb_separators(value):
    assert parse_color(value) == (100 << 16) + (100 << 8) + 100


def test_parse_color_rgb_packing():
    assert parse_color("1 2 3") == 66051
    assert parse_color("0,0,0") == 0


@pytest.mark.parametrize(
    "value",
    [
        "300,0,0",
        "0,256,0",
        "not a color",
        "#12345",
        "#ggg",
        "#",
        "1,2",
        "1234,1,1",
        "",
    ],
)
def test_parse_color_invalid_returns_none(value):
    assert parse_color(value) is None


def test_parse_color_non_string_returns_none():
    assert parse_color(None) is None
    assert parse_color(0x2ECC71) is None


def test_parse_custom_boolean_tokens():
    assert parse_custom_boolean("on") is True
    assert parse_custom_boolean("1") is True
    assert parse_custom_boolean("true") is True
    assert parse_custom_boolean("off") is False
    assert parse_custom_boolean("0") is False
    assert parse_custom_boolean("false") is False
    assert parse_custom_boolean("null") is False


def test_parse_custom_boolean_native_bool_passthrough():
    assert parse_custom_boolean(True) is True
    assert parse_custom_boolean(False) is False


def test_parse_custom_boolean_is_case_sensitive_and_strict():
    assert parse_custom_boolean("maybe") is None
    assert parse_custom_boolean("ON") is None
    assert parse_custom_boolean("True") is None
    assert parse_custom_boolean(None) is None


@pytest.mark.parametrize("value", ["١٠٠,١٠٠,١٠٠", "1 2 ٣", "# ff ff", "#+ff", "#ff ", "#fffff١"])
def test_parse_color_only_accepts_ascii_digits(value):
    assert parse_color(value) is None
