from .theme import Theme, Palette
from .generator import (
    generate_theme,
    generate_from_canonical,
    generate_canonical_grid,
    regenerate_theme,
    shade_range,
    role_hue,
    adjust_chroma_for_lightness,
    np_adjust_chroma_for_lightness,
)

__all__ = [
    "Theme",
    "Palette",
    "generate_theme",
    "generate_from_canonical",
    "generate_canonical_grid",
    "regenerate_theme",
    "shade_range",
    "role_hue",
    "adjust_chroma_for_lightness",
    "np_adjust_chroma_for_lightness",
]
