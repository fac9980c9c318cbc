import warnings
from typing import Any

from ..colors.oklch import OKLCHColor, DEFAULT_COLOR
from ..exceptions import ColorParseWarning
from ..types.color_type import ColorType, ColorTypeLike, to_color_type
from .formatters import FORMATTERS
from .parsers import PARSERS


def _match(text: Any, color_type: ColorType):
    if not isinstance(text, str):
        return None
    return PARSERS[color_type](text.strip())


def parse_to_canonical(text: str, color_type: ColorTypeLike = ColorType.HEX) -> OKLCHColor:
    """
    Parse a textual color into the canonical OKLCH record.

    Malformed input never raises: a :class:`ColorParseWarning` is issued and
    the neutral gray ``DEFAULT_COLOR`` (L=50, C=0, H=0, alpha=1) is returned.
    An unknown ``color_type`` is a caller error and raises ``ValueError``.
    """
    color_type = to_color_type(color_type)
    color = _match(text, color_type)
    if color is None:
        warnings.warn(
            f"Could not parse {text!r} as {color_type.value}; using neutral gray",
            ColorParseWarning,
            stacklevel=2,
        )
        return DEFAULT_COLOR
    return color


def render_from_canonical(color: OKLCHColor, color_type: ColorTypeLike = ColorType.HEX) -> str:
    """Render a canonical color in the requested textual format."""
    if not isinstance(color, OKLCHColor):
        raise TypeError(f"Expected OKLCHColor, got {type(color).__name__}")
    return FORMATTERS[to_color_type(color_type)](color)


def convert(text: str, from_type: ColorTypeLike, to_type: ColorTypeLike) -> str:
    """Re-encode a textual color in another format."""
    from_type = to_color_type(from_type)
    to_type = to_color_type(to_type)
    return render_from_canonical(parse_to_canonical(text, from_type), to_type)


def is_valid_color(text: str, color_type: ColorTypeLike) -> bool:
    """Whether ``text`` matches the grammar of ``color_type`` (no fallback)."""
    return _match(text, to_color_type(color_type)) is not None
