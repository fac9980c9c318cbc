"""
AutoTheme Color Space Conversions
=================================

This module maps five textual color encodings onto one canonical OKLCH record
(:class:`autotheme.colors.OKLCHColor`) and back, with both scalar and
vectorized (numpy) kernels.

Formats
-------
    hex     #rgb, #rrggbb, #rrggbbaa
    rgb     rgba(r, g, b, a)            r/g/b integers 0-255
    hsl     hsla(h, s%, l%, a)          integer degrees / percent
    oklab   oklab(L% a b / alpha)
    oklch   oklch(L% C Hdeg / alpha)

Pipeline
--------
hex/rgb/hsl -> gamma-encoded sRGB -> linear RGB -> LMS (M1) -> cube root
-> OKLab (M2) -> polar OKLCH. Rendering runs the same chain backwards and
clamps each sRGB channel to [0, 1] before quantizing.

Kernels
-------
sRGB transfer:
    srgb_to_linear(c), linear_to_srgb(c)
    np_srgb_to_linear(c), np_linear_to_srgb(c)

Linear RGB <-> OKLab:
    linear_rgb_to_oklab(r, g, b), oklab_to_linear_rgb(L, a, b)
    np_linear_rgb_to_oklab(r, g, b), np_oklab_to_linear_rgb(L, a, b)

OKLab <-> OKLCH:
    oklab_to_oklch(L, a, b), oklch_to_oklab(L, c, h)
    np_oklab_to_oklch(L, a, b), np_oklch_to_oklab(L, c, h)

HSL <-> RGB (gamma-encoded):
    hsl_to_unit_rgb(h, s, l), unit_rgb_to_hsl(r, g, b)
    np_hsl_to_unit_rgb(h, s, l), np_unit_rgb_to_hsl(r, g, b)

High-Level API
--------------
    parse_to_canonical(text, color_type)
        Text -> OKLCHColor. Malformed text warns (ColorParseWarning) and
        yields neutral gray instead of raising.
    render_from_canonical(color, color_type)
        OKLCHColor -> text.
    convert(text, from_type, to_type)
        Parse then render.
    is_valid_color(text, color_type)
        Grammar check without fallback.

Examples
--------
>>> from autotheme.conversions import parse_to_canonical, render_from_canonical
>>> purple = parse_to_canonical("#a855f7", "hex")
>>> round(purple.lightness)
63
>>> render_from_canonical(purple, "hex")
'#a855f7'
>>> render_from_canonical(purple, "rgb")
'rgba(168, 85, 247, 1)'
"""

from .srgb import srgb_to_linear, linear_to_srgb, np_srgb_to_linear, np_linear_to_srgb

from .oklab import (
    linear_rgb_to_oklab,
    oklab_to_linear_rgb,
    np_linear_rgb_to_oklab,
    np_oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    np_oklab_to_oklch,
    np_oklch_to_oklab,
)

from .css_to_hsl import hsl_to_unit_rgb, unit_rgb_to_hsl, np_hsl_to_unit_rgb, np_unit_rgb_to_hsl

from .parsers import expand_hex, PARSERS
from .formatters import np_oklch_to_unit_rgb, oklch_to_unit_rgb, FORMATTERS

# High-level API
from .wrapper import parse_to_canonical, render_from_canonical, convert, is_valid_color

# Types and enums
from ..types.color_type import ColorType

__all__ = [
    # sRGB transfer
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',

    # Linear RGB <-> OKLab
    'linear_rgb_to_oklab',
    'oklab_to_linear_rgb',
    'np_linear_rgb_to_oklab',
    'np_oklab_to_linear_rgb',

    # OKLab <-> OKLCH
    'oklab_to_oklch',
    'oklch_to_oklab',
    'np_oklab_to_oklch',
    'np_oklch_to_oklab',

    # HSL <-> RGB
    'hsl_to_unit_rgb',
    'unit_rgb_to_hsl',
    'np_hsl_to_unit_rgb',
    'np_unit_rgb_to_hsl',

    # Canonical <-> sRGB
    'np_oklch_to_unit_rgb',
    'oklch_to_unit_rgb',

    # Grammar tables
    'PARSERS',
    'FORMATTERS',
    'expand_hex',

    # High-level API
    'parse_to_canonical',
    'render_from_canonical',
    'convert',
    'is_valid_color',

    # Types
    'ColorType',
]
