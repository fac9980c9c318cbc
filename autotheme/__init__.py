"""
AutoTheme - Palette Generation From A Single Color
==================================================

Generate a five-role, eleven-shade color theme from one base color, convert
colors between hex, rgb, hsl, oklab and oklch, and store themes in a compact
text form.

Key Features
------------
- Canonical OKLCH color record shared by every format
- Perceptual shade ramps (fixed OKLCH lightness per shade, chroma damped at
  the extremes)
- Role palettes by hue rotation: primary, secondary (+30), tertiary (-30),
  accent (+180), neutral (desaturated)
- Scalar and vectorized (numpy) conversion kernels
- Delimited text codec with backslash escaping
- Immutable themes and colors

Quick Start
-----------
>>> from autotheme import generate_theme, serialize_theme, deserialize_theme
>>>
>>> theme = generate_theme("#a855f7", "hex", "hex", "50", "950")
>>> len(theme.primary)
11
>>> text = serialize_theme(theme)
>>> deserialize_theme(text)["baseColor"]
'#a855f7'
>>>
>>> # Same theme, other format
>>> theme.convert_to("oklch").base_color.startswith("oklch(")
True

Modules
-------
- colors: canonical OKLCHColor record
- conversions: color space conversion functions and text grammars
- palette: theme generation and the Theme type
- codec: theme serialization
- types: ColorType enum, shade and role tables
"""

from .colors import OKLCHColor, DEFAULT_COLOR

from .conversions import (
    parse_to_canonical,
    render_from_canonical,
    convert,
    is_valid_color,
    expand_hex,
)

from .palette import (
    Theme,
    generate_theme,
    regenerate_theme,
    shade_range,
)

from .codec import serialize_theme, deserialize_theme, FORMAT_VERSION

from .types import ColorType, SHADES, ROLES, SHADE_LIGHTNESS

from .exceptions import AutoThemeError, ThemeFormatError, ColorParseWarning

__version__ = "1.0.0"

__all__ = [
    # Colors
    "OKLCHColor",
    "DEFAULT_COLOR",

    # Conversions
    "parse_to_canonical",
    "render_from_canonical",
    "convert",
    "is_valid_color",
    "expand_hex",

    # Palette
    "Theme",
    "generate_theme",
    "regenerate_theme",
    "shade_range",

    # Codec
    "serialize_theme",
    "deserialize_theme",
    "FORMAT_VERSION",

    # Types
    "ColorType",
    "SHADES",
    "ROLES",
    "SHADE_LIGHTNESS",

    # Errors
    "AutoThemeError",
    "ThemeFormatError",
    "ColorParseWarning",

    # Version
    "__version__",
]
