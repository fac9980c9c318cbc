"""
Canonical color record.

>>> from autotheme.colors import OKLCHColor
>>> c = OKLCHColor(62.7, 0.265, 303.9)
>>> c.hue
303.9
>>> c.with_alpha(0.5).alpha
0.5

Instances are immutable; any attempt to assign an attribute after
construction raises ``AttributeError``.
"""
from .oklch import OKLCHColor, DEFAULT_COLOR

__all__ = ["OKLCHColor", "DEFAULT_COLOR"]
