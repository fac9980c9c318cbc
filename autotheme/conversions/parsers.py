"""
Grammar-level parsers for the five textual color formats.

Each parser returns an :class:`~autotheme.colors.OKLCHColor` when the text
matches its grammar and ``None`` otherwise. Substituting the neutral fallback
is the caller's job (see :func:`autotheme.conversions.wrapper.parse_to_canonical`).
"""
from __future__ import annotations
import re
from typing import Callable, Dict, Optional

from ..colors.oklch import OKLCHColor
from ..types.color_type import ColorType
from .css_to_hsl import hsl_to_unit_rgb
from .oklab import np_linear_rgb_to_oklab, oklab_to_oklch
from .srgb import np_srgb_to_linear

_NUM = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)"
_UNUM = r"(?:\d+(?:\.\d*)?|\.\d+)"

HEX_PATTERN = re.compile(r"#([0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})", re.IGNORECASE)
RGB_PATTERN = re.compile(
    rf"rgba\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,\s*({_UNUM})\s*\)", re.IGNORECASE
)
HSL_PATTERN = re.compile(
    rf"hsla\(\s*(\d+)\s*,\s*(\d+)%\s*,\s*(\d+)%\s*,\s*({_UNUM})\s*\)", re.IGNORECASE
)
OKLAB_PATTERN = re.compile(
    rf"oklab\(\s*({_UNUM})%\s+({_NUM})\s+({_NUM})\s*/\s*({_UNUM})\s*\)", re.IGNORECASE
)
# ``deg`` is optional so strings from older renderers still parse
OKLCH_PATTERN = re.compile(
    rf"oklch\(\s*({_UNUM})%\s+({_UNUM})\s+({_UNUM})(?:deg)?\s*/\s*({_UNUM})\s*\)", re.IGNORECASE
)


def expand_hex(hex_color: str) -> str:
    """Expand ``#abc`` to ``#aabbcc``; any other input is returned unchanged."""
    match = HEX_PATTERN.fullmatch(hex_color.strip()) if isinstance(hex_color, str) else None
    if match is None or len(match.group(1)) != 3:
        return hex_color
    return "#" + "".join(ch * 2 for ch in match.group(1))


def unit_rgb_to_canonical(r: float, g: float, b: float, a: float = 1.0) -> OKLCHColor:
    """Gamma-encoded sRGB in [0, 1] to the canonical color."""
    lin = np_srgb_to_linear([r, g, b])
    L, A, B = (float(v) for v in np_linear_rgb_to_oklab(lin[0], lin[1], lin[2]))
    L, c, h = oklab_to_oklch(L, A, B)
    return OKLCHColor(L, c, h, a)


def parse_hex(text: str) -> Optional[OKLCHColor]:
    match = HEX_PATTERN.fullmatch(text)
    if match is None:
        return None
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    r, g, b = (int(digits[i:i + 2], 16) / 255 for i in (0, 2, 4))
    a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return unit_rgb_to_canonical(r, g, b, a)


def parse_rgb(text: str) -> Optional[OKLCHColor]:
    match = RGB_PATTERN.fullmatch(text)
    if match is None:
        return None
    channels = [int(v) for v in match.group(1, 2, 3)]
    alpha = float(match.group(4))
    if any(v > 255 for v in channels) or alpha > 1:
        return None
    r, g, b = (v / 255 for v in channels)
    return unit_rgb_to_canonical(r, g, b, alpha)


def parse_hsl(text: str) -> Optional[OKLCHColor]:
    match = HSL_PATTERN.fullmatch(text)
    if match is None:
        return None
    h, s, l = (int(v) for v in match.group(1, 2, 3))
    alpha = float(match.group(4))
    if h > 360 or s > 100 or l > 100 or alpha > 1:
        return None
    r, g, b = hsl_to_unit_rgb(h, s / 100, l / 100)
    return unit_rgb_to_canonical(r, g, b, alpha)


def parse_oklab(text: str) -> Optional[OKLCHColor]:
    match = OKLAB_PATTERN.fullmatch(text)
    if match is None:
        return None
    L, a, b, alpha = (float(v) for v in match.groups())
    if alpha > 1:
        return None
    L, c, h = oklab_to_oklch(L, a, b)
    return OKLCHColor(L, c, h, alpha)


def parse_oklch(text: str) -> Optional[OKLCHColor]:
    match = OKLCH_PATTERN.fullmatch(text)
    if match is None:
        return None
    L, c, h, alpha = (float(v) for v in match.groups())
    if alpha > 1:
        return None
    return OKLCHColor(L, c, h, alpha)


PARSERS: Dict[ColorType, Callable[[str], Optional[OKLCHColor]]] = {
    ColorType.HEX: parse_hex,
    ColorType.RGB: parse_rgb,
    ColorType.HSL: parse_hsl,
    ColorType.OKLAB: parse_oklab,
    ColorType.OKLCH: parse_oklch,
}
