from .color_type import ColorType, ColorTypeLike, SRGB_TYPES, to_color_type
from .theme_types import (
    Shade,
    Role,
    ShadeLike,
    SHADES,
    SHADE_LIGHTNESS,
    ROLES,
    ROLE_HUE_OFFSETS,
    ROLE_CHROMA_MULTIPLIERS,
    DEFAULT_MIN_SHADE,
    DEFAULT_MAX_SHADE,
    to_shade,
    to_role,
    shade_index,
)

__all__ = [
    "ColorType",
    "ColorTypeLike",
    "SRGB_TYPES",
    "to_color_type",
    "Shade",
    "Role",
    "ShadeLike",
    "SHADES",
    "SHADE_LIGHTNESS",
    "ROLES",
    "ROLE_HUE_OFFSETS",
    "ROLE_CHROMA_MULTIPLIERS",
    "DEFAULT_MIN_SHADE",
    "DEFAULT_MAX_SHADE",
    "to_shade",
    "to_role",
    "shade_index",
]
