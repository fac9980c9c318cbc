# No dependencies
from enum import Enum
from typing import Union


class ColorType(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    OKLAB = "oklab"
    OKLCH = "oklch"


ColorTypeLike = Union[ColorType, str]

# Formats that pass through gamma-encoded sRGB and are quantized to 8 bits
SRGB_TYPES = {ColorType.HEX, ColorType.RGB, ColorType.HSL}


def to_color_type(value: ColorTypeLike) -> ColorType:
    """Coerce a ``ColorType`` or its (case-insensitive) string value."""
    if isinstance(value, ColorType):
        return value
    if isinstance(value, str):
        try:
            return ColorType(value.strip().lower())
        except ValueError:
            pass
    valid = ", ".join(t.value for t in ColorType)
    raise ValueError(f"Unknown color type: {value!r} (expected one of {valid})")
