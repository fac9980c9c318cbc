from __future__ import annotations
from typing import Dict, Literal, Tuple, Union

Shade = Literal["50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950"]
Role = Literal["primary", "secondary", "tertiary", "accent", "neutral"]
ShadeLike = Union[Shade, str, int]

# 50 is the brightest, 950 the darkest
SHADES: Tuple[str, ...] = (
    "50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950",
)

# Target OKLCH lightness (0-100) per shade, Tailwind-like distribution
SHADE_LIGHTNESS: Dict[str, float] = {
    "50": 97,
    "100": 94,
    "200": 86,
    "300": 77,
    "400": 66,
    "500": 55,
    "600": 45,
    "700": 35,
    "800": 25,
    "900": 15,
    "950": 8,
}

ROLES: Tuple[str, ...] = ("primary", "secondary", "tertiary", "accent", "neutral")

ROLE_HUE_OFFSETS: Dict[str, float] = {
    "primary": 0,
    "secondary": 30,
    "tertiary": -30,
    "accent": 180,
    "neutral": 0,
}

ROLE_CHROMA_MULTIPLIERS: Dict[str, float] = {
    "primary": 1.0,
    "secondary": 1.0,
    "tertiary": 1.0,
    "accent": 1.0,
    "neutral": 0.1,
}

DEFAULT_MIN_SHADE = "50"
DEFAULT_MAX_SHADE = "900"

# Chroma falloff around mid lightness
CHROMA_PEAK_LIGHTNESS = 55.0
CHROMA_FALLOFF_STRENGTH = 0.5
CHROMA_MIN_FACTOR = 0.3


def to_shade(value: ShadeLike) -> str:
    """Normalize a shade label (``500`` or ``"500"``) and validate it."""
    shade = str(value).strip()
    if shade not in SHADE_LIGHTNESS:
        raise ValueError(f"Unknown shade: {value!r} (expected one of {', '.join(SHADES)})")
    return shade


def to_role(value: str) -> str:
    role = str(value).strip().lower()
    if role not in ROLE_HUE_OFFSETS:
        raise ValueError(f"Unknown role: {value!r} (expected one of {', '.join(ROLES)})")
    return role


def shade_index(value: ShadeLike) -> int:
    return SHADES.index(to_shade(value))
