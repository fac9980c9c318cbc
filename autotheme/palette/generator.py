"""
Palette generation.

A theme is derived from one base color: each role rotates the base hue and
scales its chroma, each shade pins a target lightness, and chroma is damped
toward the light and dark extremes. The role x shade grid is computed with
numpy in one pass and then rendered color by color.
"""
from __future__ import annotations
from typing import Dict, Optional, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..colors.oklch import OKLCHColor
from ..conversions.wrapper import parse_to_canonical, render_from_canonical
from ..types.color_type import ColorType, ColorTypeLike, to_color_type
from ..types.theme_types import (
    CHROMA_FALLOFF_STRENGTH,
    CHROMA_MIN_FACTOR,
    CHROMA_PEAK_LIGHTNESS,
    DEFAULT_MAX_SHADE,
    DEFAULT_MIN_SHADE,
    ROLE_CHROMA_MULTIPLIERS,
    ROLE_HUE_OFFSETS,
    ROLES,
    SHADE_LIGHTNESS,
    SHADES,
    ShadeLike,
    shade_index,
    to_role,
)
from .theme import Theme


def shade_range(min_shade: ShadeLike, max_shade: ShadeLike) -> Tuple[str, ...]:
    """
    Inclusive run of shade labels from ``min_shade`` to ``max_shade``.

    A reversed range (``min_shade`` darker than ``max_shade``) is empty, and
    so is a range with a bound outside :data:`SHADES`.
    """
    low, high = str(min_shade).strip(), str(max_shade).strip()
    if low not in SHADE_LIGHTNESS or high not in SHADE_LIGHTNESS:
        return ()
    return SHADES[shade_index(low):shade_index(high) + 1]


def role_hue(base_hue: float, role: str) -> float:
    return (base_hue + ROLE_HUE_OFFSETS[to_role(role)] + 360) % 360


def adjust_chroma_for_lightness(chroma: float, lightness: float) -> float:
    """
    Damp chroma away from mid lightness.

    The factor is ``1 - (|L - 55| / 55)^2 * 0.5``, floored at 0.3, so
    near-white and near-black shades do not turn into implausible neon.
    """
    distance = abs(lightness - CHROMA_PEAK_LIGHTNESS) / CHROMA_PEAK_LIGHTNESS
    factor = 1 - distance ** 2 * CHROMA_FALLOFF_STRENGTH
    return chroma * max(CHROMA_MIN_FACTOR, factor)


def np_adjust_chroma_for_lightness(chroma: NDArray, lightness: NDArray) -> NDArray:
    """Vectorized :func:`adjust_chroma_for_lightness` (broadcasts)."""
    lightness = np.asarray(lightness, dtype=float)
    distance = np.abs(lightness - CHROMA_PEAK_LIGHTNESS) / CHROMA_PEAK_LIGHTNESS
    factor = np.maximum(CHROMA_MIN_FACTOR, 1 - distance ** 2 * CHROMA_FALLOFF_STRENGTH)
    return np.asarray(chroma, dtype=float) * factor


def generate_canonical_grid(base: OKLCHColor, shades: Tuple[str, ...]) -> Dict[str, Dict[str, OKLCHColor]]:
    """Canonical role -> shade -> color grid for a base color."""
    offsets = np.array([ROLE_HUE_OFFSETS[role] for role in ROLES], dtype=float)
    multipliers = np.array([ROLE_CHROMA_MULTIPLIERS[role] for role in ROLES], dtype=float)
    lightness = np.array([SHADE_LIGHTNESS[shade] for shade in shades], dtype=float)

    hues = (base.hue + offsets + 360) % 360
    chromas = np_adjust_chroma_for_lightness(
        (base.chroma * multipliers)[:, None],
        lightness[None, :],
    )

    return {
        role: {
            shade: OKLCHColor(lightness[j], chromas[i, j], hues[i], base.alpha)
            for j, shade in enumerate(shades)
        }
        for i, role in enumerate(ROLES)
    }


def generate_from_canonical(
    base: OKLCHColor,
    output_type: ColorTypeLike = ColorType.HEX,
    min_shade: ShadeLike = DEFAULT_MIN_SHADE,
    max_shade: ShadeLike = DEFAULT_MAX_SHADE,
) -> Theme:
    """Build a :class:`Theme` from an already parsed base color."""
    output_type = to_color_type(output_type)
    canonical = generate_canonical_grid(base, shade_range(min_shade, max_shade))
    palettes = {
        role: {shade: render_from_canonical(color, output_type) for shade, color in shades.items()}
        for role, shades in canonical.items()
    }
    base_color = render_from_canonical(base, output_type)
    return Theme(output_type, base_color, palettes, base, canonical)


def generate_theme(
    base_color: str,
    input_type: ColorTypeLike = ColorType.HEX,
    output_type: ColorTypeLike = ColorType.HEX,
    min_shade: ShadeLike = DEFAULT_MIN_SHADE,
    max_shade: ShadeLike = DEFAULT_MAX_SHADE,
) -> Theme:
    """
    Generate a five-role theme from one color.

    Args:
        base_color: The base color text, e.g. ``"#a855f7"``
        input_type: Format of ``base_color``
        output_type: Format of every color in the result
        min_shade: Lightest shade to include (``"50"`` is the lightest)
        max_shade: Darkest shade to include (``"950"`` is the darkest)

    Returns:
        Theme with ``primary``, ``secondary``, ``tertiary``, ``accent`` and
        ``neutral`` palettes keyed by shade label. A malformed ``base_color``
        yields a neutral gray theme (with a ``ColorParseWarning``).
    """
    base = parse_to_canonical(base_color, input_type)
    return generate_from_canonical(base, output_type, min_shade, max_shade)


def regenerate_theme(
    theme: Theme,
    output_type: Optional[ColorTypeLike] = None,
    min_shade: Optional[ShadeLike] = None,
    max_shade: Optional[ShadeLike] = None,
) -> Theme:
    """Regenerate ``theme`` from its base color, overriding only what is given."""
    shades = theme.shades
    return generate_from_canonical(
        theme.base,
        output_type if output_type is not None else theme.color_type,
        min_shade if min_shade is not None else (shades[0] if shades else DEFAULT_MIN_SHADE),
        max_shade if max_shade is not None else (shades[-1] if shades else DEFAULT_MAX_SHADE),
    )
