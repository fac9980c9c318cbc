from autotheme.palette import Theme, generate_theme
from autotheme.colors import OKLCHColor
from autotheme.types import ROLES, SHADES, ColorType
from ..samples import PURPLE
import pytest

def test_field_order(purple_theme):
    keys = [key for key, _ in purple_theme.fields()]
    assert keys == ["colorType", "baseColor", *ROLES]

def test_to_dict(purple_theme):
    data = purple_theme.to_dict()
    assert data["colorType"] == "hex"
    assert data["baseColor"] == PURPLE
    assert isinstance(data["primary"], dict)
    assert list(data["primary"]) == list(SHADES)

def test_role_accessors(purple_theme):
    assert purple_theme.primary is purple_theme.palette("primary")
    assert purple_theme.secondary == purple_theme.palette("secondary")
    assert purple_theme.tertiary == purple_theme.palette("tertiary")
    assert purple_theme.accent == purple_theme.palette("accent")
    assert purple_theme.neutral == purple_theme.palette("neutral")
    with pytest.raises(ValueError):
        purple_theme.palette("background")

def test_theme_is_immutable(purple_theme):
    with pytest.raises(AttributeError):
        purple_theme.base_color = "#000000"
    with pytest.raises(TypeError):
        purple_theme.primary["500"] = "#000000"

def test_canonical_lookup_accepts_int_shades(purple_theme):
    assert purple_theme.canonical("primary", 500) == purple_theme.canonical("primary", "500")
    assert isinstance(purple_theme.canonical("accent", "50"), OKLCHColor)

def test_convert_to_regenerates(purple_theme):
    converted = purple_theme.convert_to("rgb")
    assert converted is not purple_theme
    assert converted.color_type is ColorType.RGB
    assert converted.base_color == "rgba(168, 85, 247, 1)"
    assert converted.shades == purple_theme.shades
    assert purple_theme.color_type is ColorType.HEX
    assert converted.convert_to("hex") == purple_theme

def test_with_shade_range(purple_theme):
    narrowed = purple_theme.with_shade_range("300", "600")
    assert narrowed.shades == ("300", "400", "500", "600")
    for shade in narrowed.shades:
        assert narrowed.primary[shade] == purple_theme.primary[shade]
    assert len(purple_theme.primary) == 11

def test_palettes_are_reordered_by_shade():
    base = OKLCHColor(50, 0, 0)
    theme = Theme("hex", "#777777", {"primary": {"900": "#111111", "50": "#eeeeee", 500: "#777777"}}, base)
    assert list(theme.primary) == ["50", "500", "900"]
    assert dict(theme.secondary) == {}

def test_unknown_role_rejected():
    with pytest.raises(ValueError):
        Theme("hex", "#777777", {"highlight": {"50": "#eeeeee"}}, OKLCHColor(50, 0, 0))

def test_unknown_shade_rejected():
    with pytest.raises(ValueError):
        Theme("hex", "#777777", {"primary": {"75": "#eeeeee"}}, OKLCHColor(50, 0, 0))

def test_equality(purple_theme):
    assert purple_theme == generate_theme(PURPLE, "hex", "hex", "50", "950")
    assert purple_theme != generate_theme(PURPLE, "hex", "hex", "50", "900")
    assert purple_theme != generate_theme("#336699", "hex", "hex", "50", "950")

def test_repr(purple_theme):
    assert repr(purple_theme) == "Theme(color_type='hex', base_color='#a855f7', shades=50-950)"
    empty = generate_theme(PURPLE, "hex", "hex", "900", "50")
    assert "shades=empty" in repr(empty)
