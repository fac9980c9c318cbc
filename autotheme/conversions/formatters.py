"""Render canonical colors to their textual formats."""
from __future__ import annotations
import math
from typing import Callable, Dict, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..colors.oklch import OKLCHColor
from ..types.color_type import ColorType
from ..utils.num_utils import format_number
from .css_to_hsl import unit_rgb_to_hsl
from .oklab import np_oklab_to_linear_rgb, np_oklch_to_oklab
from .srgb import np_linear_to_srgb

# Decimal places for the unquantized formats (trailing zeros are dropped)
LIGHTNESS_DECIMALS = 2
AXIS_DECIMALS = 4
HUE_DECIMALS = 2


def quantize(value: float, scale: float) -> int:
    """Round half up, so 0.5 steps never depend on banker's rounding."""
    return int(math.floor(value * scale + 0.5))


def np_oklch_to_unit_rgb(L: NDArray, c: NDArray, h: NDArray) -> NDArray:
    """
    Vectorized: canonical OKLCH to gamma-encoded sRGB, each channel clamped to [0, 1].

    Returns:
        rgb: array of shape (..., 3)
    """
    lab = np_oklch_to_oklab(L, c, h)
    lin = np_oklab_to_linear_rgb(lab[..., 0], lab[..., 1], lab[..., 2])
    return np.clip(np_linear_to_srgb(lin), 0.0, 1.0)


def oklch_to_unit_rgb(color: OKLCHColor) -> Tuple[float, float, float]:
    r, g, b = np_oklch_to_unit_rgb(color.lightness, color.chroma, color.hue)
    return float(r), float(g), float(b)


def format_hex(color: OKLCHColor) -> str:
    r, g, b = oklch_to_unit_rgb(color)
    channels = [r, g, b]
    # 8-digit form only for translucent colors
    if color.alpha < 1:
        channels.append(color.alpha)
    return "#" + "".join(f"{quantize(c, 255):02x}" for c in channels)


def format_rgb(color: OKLCHColor) -> str:
    r, g, b = (quantize(c, 255) for c in oklch_to_unit_rgb(color))
    return f"rgba({r}, {g}, {b}, {format_number(color.alpha)})"


def format_hsl(color: OKLCHColor) -> str:
    h, s, l = unit_rgb_to_hsl(*oklch_to_unit_rgb(color))
    return f"hsla({quantize(h, 1) % 360}, {quantize(s, 100)}%, {quantize(l, 100)}%, {format_number(color.alpha)})"


def format_oklab(color: OKLCHColor) -> str:
    L, a, b, alpha = color.to_oklab()
    return (
        f"oklab({format_number(L, LIGHTNESS_DECIMALS)}% {format_number(a, AXIS_DECIMALS)} "
        f"{format_number(b, AXIS_DECIMALS)} / {format_number(alpha)})"
    )


def format_oklch(color: OKLCHColor) -> str:
    hue = format_number(color.hue, HUE_DECIMALS)
    # 359.999 would print as 360
    if float(hue) >= 360:
        hue = "0"
    return (
        f"oklch({format_number(color.lightness, LIGHTNESS_DECIMALS)}% "
        f"{format_number(color.chroma, AXIS_DECIMALS)} {hue}deg / {format_number(color.alpha)})"
    )


FORMATTERS: Dict[ColorType, Callable[[OKLCHColor], str]] = {
    ColorType.HEX: format_hex,
    ColorType.RGB: format_rgb,
    ColorType.HSL: format_hsl,
    ColorType.OKLAB: format_oklab,
    ColorType.OKLCH: format_oklch,
}
