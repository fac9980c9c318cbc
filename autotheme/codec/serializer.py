"""
Compact text codec for themes.

Layout (with the default ``|`` escape character)::

    colorType:hex|baseColor:#a855f7||primary:{50:#fbf4ff|100:#f4e8ff}||secondary:{...}

Scalar fields come first, each ``key:value`` terminated by the escape
character. Nested palettes follow, each introduced by the escape character
and terminated by it, so a doubled escape character separates the scalar
section from the palettes and one palette from the next. The final escape
character is dropped.

Inside keys and values a backslash escapes ``\\``, the escape character, ``:``,
``{`` and ``}``. Generated themes never contain those characters with the
default escape character, so their output is identical to the unescaped
legacy layout.
"""
from __future__ import annotations
from typing import Any, Dict, List, Mapping, Tuple, Union

from ..exceptions import ThemeFormatError
from ..palette.theme import Theme

FORMAT_VERSION = 2
DEFAULT_ESCAPE_CHAR = "|"
BACKSLASH = "\\"
PAIR_SEPARATOR = ":"
OPEN_BRACE = "{"
CLOSE_BRACE = "}"
RESERVED_CHARS = {BACKSLASH, PAIR_SEPARATOR, OPEN_BRACE, CLOSE_BRACE}

ThemeLike = Dict[str, Union[str, Dict[str, str]]]


def _check_escape_char(escape_char: str) -> None:
    if not isinstance(escape_char, str) or len(escape_char) != 1:
        raise ValueError(f"escape_char must be a single character, got {escape_char!r}")
    if escape_char in RESERVED_CHARS:
        raise ValueError(f"escape_char cannot be one of {sorted(RESERVED_CHARS)}, got {escape_char!r}")


def escape(text: str, escape_char: str = DEFAULT_ESCAPE_CHAR) -> str:
    special = RESERVED_CHARS | {escape_char}
    return "".join(BACKSLASH + ch if ch in special else ch for ch in text)


def unescape(text: str) -> str:
    out: List[str] = []
    i = 0
    while i < len(text):
        if text[i] == BACKSLASH and i + 1 < len(text):
            i += 1
        out.append(text[i])
        i += 1
    return "".join(out)


def find_unescaped(text: str, token: str, start: int = 0) -> int:
    """Index of the first ``token`` not preceded by a backslash escape, or -1."""
    i = start
    while i < len(text):
        if text[i] == BACKSLASH:
            i += 2
            continue
        if text.startswith(token, i):
            return i
        i += 1
    return -1


def split_unescaped(text: str, separator: str) -> List[str]:
    parts: List[str] = []
    start = 0
    while True:
        idx = find_unescaped(text, separator, start)
        if idx == -1:
            parts.append(text[start:])
            return parts
        parts.append(text[start:idx])
        start = idx + len(separator)


def _split_pair(prop: str) -> Tuple[str, str]:
    idx = find_unescaped(prop, PAIR_SEPARATOR)
    if idx == -1:
        raise ThemeFormatError(f"Expected 'key{PAIR_SEPARATOR}value', got {prop!r}")
    return unescape(prop[:idx]), unescape(prop[idx + 1:])


def serialize_theme(theme: Theme, escape_char: str = DEFAULT_ESCAPE_CHAR) -> str:
    """
    Serialize a :class:`Theme` into the compact text layout.

    Args:
        theme: A theme produced by this package
        escape_char: Field delimiter; must be passed unchanged to
            :func:`deserialize_theme`. Defaults to ``"|"``

    Raises:
        TypeError: ``theme`` is not a :class:`Theme`
        ValueError: ``escape_char`` is not a single non-reserved character
    """
    if not isinstance(theme, Theme):
        raise TypeError(f"Object is not a Theme instance: {type(theme).__name__}")
    _check_escape_char(escape_char)

    def esc(text: Any) -> str:
        return escape(str(text), escape_char)

    serialized = ""

    # Scalar properties
    for key, value in theme.fields():
        if not isinstance(value, str) or len(value) <= 1:
            continue
        serialized += f"{esc(key)}{PAIR_SEPARATOR}{esc(value)}{escape_char}"

    # Nested properties
    for key, value in theme.fields():
        if not isinstance(value, Mapping) or not value:
            continue
        body = escape_char.join(
            f"{esc(key2)}{PAIR_SEPARATOR}{esc(value2)}" for key2, value2 in value.items()
        )
        serialized += f"{escape_char}{esc(key)}{PAIR_SEPARATOR}{OPEN_BRACE}{body}{CLOSE_BRACE}{escape_char}"

    if serialized.endswith(escape_char):
        serialized = serialized[:-1]

    return serialized


def deserialize_theme(serialized_theme: str, escape_char: str = DEFAULT_ESCAPE_CHAR) -> ThemeLike:
    """
    Parse :func:`serialize_theme` output into a plain nested dict.

    Text without the doubled escape character is read as scalars only.

    Raises:
        TypeError: ``serialized_theme`` is not a string
        ValueError: ``serialized_theme`` is empty or ``escape_char`` is invalid
        ThemeFormatError: a field or palette does not follow the layout
    """
    if not isinstance(serialized_theme, str):
        raise TypeError(f"Serialized theme must be a string, got {type(serialized_theme).__name__}")
    if not serialized_theme:
        raise ValueError("Serialized theme was not passed as a parameter")
    _check_escape_char(escape_char)

    sentinel = escape_char * 2
    theme: ThemeLike = {}

    objects_start = find_unescaped(serialized_theme, sentinel)
    if objects_start == -1:
        simple_string, object_string = serialized_theme, ""
    else:
        simple_string = serialized_theme[:objects_start]
        object_string = serialized_theme[objects_start + len(sentinel):]

    for prop in split_unescaped(simple_string, escape_char):
        if not prop:
            continue
        key, value = _split_pair(prop)
        theme[key] = value

    if not object_string:
        return theme

    for prop in split_unescaped(object_string, sentinel):
        if not prop:
            continue
        separator_index = find_unescaped(prop, PAIR_SEPARATOR)
        body_start = separator_index + 1
        if (
            separator_index == -1
            or not prop.startswith(OPEN_BRACE, body_start)
            or find_unescaped(prop, CLOSE_BRACE, body_start) != len(prop) - 1
        ):
            raise ThemeFormatError(f"Expected 'key{PAIR_SEPARATOR}{OPEN_BRACE}...{CLOSE_BRACE}', got {prop!r}")

        obj_key = unescape(prop[:separator_index])
        obj_value = prop[body_start + 1:-1]

        nested: Dict[str, str] = {}
        for obj_value_prop in split_unescaped(obj_value, escape_char):
            if not obj_value_prop:
                continue
            nested_key, nested_value = _split_pair(obj_value_prop)
            nested[nested_key] = nested_value
        theme[obj_key] = nested

    return theme
