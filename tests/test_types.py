from autotheme.types import (
    ColorType,
    to_color_type,
    to_shade,
    to_role,
    shade_index,
    SHADES,
    SHADE_LIGHTNESS,
    ROLES,
    ROLE_HUE_OFFSETS,
    ROLE_CHROMA_MULTIPLIERS,
)
import pytest

def test_color_type_coercion():
    assert to_color_type("hex") is ColorType.HEX
    assert to_color_type(" OKLCH ") is ColorType.OKLCH
    assert to_color_type(ColorType.RGB) is ColorType.RGB
    assert ColorType.HSL == "hsl"

@pytest.mark.parametrize("bad", ["lab", "", None, 3])
def test_color_type_rejects_unknown(bad):
    with pytest.raises(ValueError):
        to_color_type(bad)

def test_shade_table():
    assert SHADES == ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")
    assert SHADE_LIGHTNESS["50"] == 97
    assert SHADE_LIGHTNESS["500"] == 55
    assert SHADE_LIGHTNESS["950"] == 8
    assert list(SHADE_LIGHTNESS) == list(SHADES)

def test_role_tables():
    assert ROLES == ("primary", "secondary", "tertiary", "accent", "neutral")
    assert [ROLE_HUE_OFFSETS[r] for r in ROLES] == [0, 30, -30, 180, 0]
    assert [ROLE_CHROMA_MULTIPLIERS[r] for r in ROLES] == [1.0, 1.0, 1.0, 1.0, 0.1]

def test_to_shade():
    assert to_shade(500) == "500"
    assert to_shade(" 950 ") == "950"
    with pytest.raises(ValueError):
        to_shade("1000")

def test_to_role():
    assert to_role("Accent") == "accent"
    with pytest.raises(ValueError):
        to_role("background")

def test_shade_index():
    assert shade_index("50") == 0
    assert shade_index(950) == 10
