from .serializer import (
    serialize_theme,
    deserialize_theme,
    escape,
    unescape,
    ThemeLike,
    FORMAT_VERSION,
    DEFAULT_ESCAPE_CHAR,
)

__all__ = [
    "serialize_theme",
    "deserialize_theme",
    "escape",
    "unescape",
    "ThemeLike",
    "FORMAT_VERSION",
    "DEFAULT_ESCAPE_CHAR",
]
