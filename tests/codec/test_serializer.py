from autotheme.codec import serialize_theme, deserialize_theme, escape, unescape, FORMAT_VERSION
from autotheme.exceptions import ThemeFormatError
from autotheme.palette import Theme, generate_theme
from autotheme.colors import OKLCHColor
from autotheme.types import ROLES
from ..samples import PURPLE
import pytest

def _non_empty(data):
    return {key: value for key, value in data.items() if value != {}}

def test_layout(purple_theme):
    text = serialize_theme(purple_theme)
    assert text.startswith(f"colorType:hex|baseColor:{PURPLE}||primary:{{50:")
    assert "}||secondary:{50:" in text
    assert "}||neutral:{50:" in text
    assert text.endswith("}")
    assert not text.endswith("|")
    assert text.count("||") == len(ROLES)

def test_layout_of_a_tiny_theme():
    base = OKLCHColor(50, 0, 0)
    theme = Theme("hex", "#777777", {"primary": {"50": "#eeeeee", "900": "#111111"}, "accent": {"500": "#777777"}}, base)
    assert serialize_theme(theme) == (
        "colorType:hex|baseColor:#777777"
        "||primary:{50:#eeeeee|900:#111111}"
        "||accent:{500:#777777}"
    )

def test_round_trip(purple_theme):
    data = deserialize_theme(serialize_theme(purple_theme))
    assert data == purple_theme.to_dict()

@pytest.mark.parametrize("color_type", ["hex", "rgb", "hsl", "oklab", "oklch"])
def test_round_trip_every_color_type(color_type):
    theme = generate_theme(PURPLE, "hex", color_type, "50", "950")
    assert deserialize_theme(serialize_theme(theme)) == theme.to_dict()

@pytest.mark.parametrize("escape_char", [";", "#", ",", "%", "/"])
def test_round_trip_custom_escape_char(escape_char):
    # "#", "," and "%" also appear inside hex/rgb/hsl values and must be escaped
    for color_type in ("hex", "rgb", "hsl", "oklch"):
        theme = generate_theme(PURPLE, "hex", color_type, "100", "800")
        text = serialize_theme(theme, escape_char)
        assert deserialize_theme(text, escape_char) == theme.to_dict()

def test_reversed_range_serializes_scalars_only():
    theme = generate_theme(PURPLE, "hex", "hex", "900", "50")
    text = serialize_theme(theme)
    assert text == f"colorType:hex|baseColor:{PURPLE}"
    assert deserialize_theme(text) == {"colorType": "hex", "baseColor": PURPLE}
    assert _non_empty(theme.to_dict()) == deserialize_theme(text)

def test_one_character_scalars_are_skipped():
    theme = Theme("hex", "#", {"primary": {"50": "#eeeeee"}}, OKLCHColor(50, 0, 0))
    assert serialize_theme(theme) == "colorType:hex||primary:{50:#eeeeee}"

def test_legacy_string():
    text = "colorType:rgb|baseColor:rgba(1, 2, 3, 1)||primary:{50:rgba(9, 9, 9, 1)|100:rgba(8, 8, 8, 1)}||neutral:{50:rgba(7, 7, 7, 1)}"
    assert deserialize_theme(text) == {
        "colorType": "rgb",
        "baseColor": "rgba(1, 2, 3, 1)",
        "primary": {"50": "rgba(9, 9, 9, 1)", "100": "rgba(8, 8, 8, 1)"},
        "neutral": {"50": "rgba(7, 7, 7, 1)"},
    }

def test_values_with_reserved_characters_round_trip():
    base = OKLCHColor(50, 0, 0)
    theme = Theme("hex", "a|b:c{d}e\\f", {"primary": {"50": "x||y"}}, base)
    text = serialize_theme(theme)
    assert deserialize_theme(text) == _non_empty(theme.to_dict())
    data = deserialize_theme(text)
    assert data["baseColor"] == "a|b:c{d}e\\f"
    assert data["primary"] == {"50": "x||y"}

def test_serialize_rejects_non_theme(purple_theme):
    with pytest.raises(TypeError):
        serialize_theme(purple_theme.to_dict())
    with pytest.raises(TypeError):
        serialize_theme("colorType:hex")

def test_invalid_escape_char(purple_theme):
    for escape_char in ("", "||", ":", "{", "}", "\\"):
        with pytest.raises(ValueError):
            serialize_theme(purple_theme, escape_char)
        with pytest.raises(ValueError):
            deserialize_theme("colorType:hex", escape_char)

def test_deserialize_rejects_empty_input():
    with pytest.raises(ValueError):
        deserialize_theme("")
    with pytest.raises(TypeError):
        deserialize_theme(None)

def test_deserialize_without_sentinel_reads_scalars_only():
    assert deserialize_theme("colorType:hex|baseColor:#fff") == {"colorType": "hex", "baseColor": "#fff"}

def test_deserialize_malformed_input():
    with pytest.raises(ThemeFormatError):
        deserialize_theme("colorType|baseColor:#fff")
    with pytest.raises(ThemeFormatError):
        deserialize_theme("colorType:hex||primary:50:#fff")
    with pytest.raises(ThemeFormatError):
        deserialize_theme("colorType:hex||primary:{50:#fff")
    with pytest.raises(ThemeFormatError):
        deserialize_theme("colorType:hex||primary:{50}")
    # ThemeFormatError is a ValueError
    with pytest.raises(ValueError):
        deserialize_theme("colorType:hex||primary")

def test_from_serialized(purple_theme):
    text = serialize_theme(purple_theme)
    rebuilt = Theme.from_serialized(text)
    assert rebuilt == purple_theme
    assert rebuilt.shades == purple_theme.shades
    assert abs(rebuilt.canonical("primary", "500").lightness - 55) <= 0.5

def test_escape_helpers():
    assert escape("a|b:c", "|") == "a\\|b\\:c"
    assert escape("{x}\\", ";") == "\\{x\\}\\\\"
    assert unescape(escape("a|b:c{d}e\\f", "|")) == "a|b:c{d}e\\f"
    assert escape("#a855f7") == "#a855f7"

def test_format_version():
    assert FORMAT_VERSION == 2
