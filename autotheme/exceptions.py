"""Exception and warning types raised by autotheme."""


class AutoThemeError(Exception):
    """Base class for autotheme errors."""


class ThemeFormatError(AutoThemeError, ValueError):
    """A serialized theme string does not follow the codec grammar."""


class ColorParseWarning(UserWarning):
    """A color string did not match its grammar and the neutral default was used."""
