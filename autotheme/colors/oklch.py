from __future__ import annotations
import math
from typing import ClassVar, Tuple

from ..utils.num_utils import clamp01, normalize_hue


class OKLCHColor:
    """
    Canonical color: OKLCH lightness (0-100), chroma (>= 0), hue (degrees)
    and alpha (0-1).

    Every textual format is a view over this record and all palette
    arithmetic happens here. Values are normalized on construction (hue wraps,
    the rest clamp) and instances are frozen afterwards.
    """
    __slots__ = ('_lightness', '_chroma', '_hue', '_alpha', '_is_frozen')

    max_lightness: ClassVar[float] = 100.0

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, lightness: float, chroma: float, hue: float, alpha: float = 1.0) -> None:
        self._lightness = max(0.0, min(float(lightness), self.max_lightness))
        self._chroma = max(0.0, float(chroma))
        self._hue = normalize_hue(hue)
        self._alpha = clamp01(alpha)

        # freeze instance: no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def lightness(self) -> float:
        return self._lightness

    @property
    def chroma(self) -> float:
        return self._chroma

    @property
    def hue(self) -> float:
        return self._hue

    @property
    def alpha(self) -> float:
        return self._alpha

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return self._lightness, self._chroma, self._hue, self._alpha

    def to_oklab(self) -> Tuple[float, float, float, float]:
        """Return ``(L, a, b, alpha)`` with ``L`` on the 0-100 scale."""
        h_rad = math.radians(self._hue)
        a = self._chroma * math.cos(h_rad)
        b = self._chroma * math.sin(h_rad)
        return self._lightness, a, b, self._alpha

    def with_alpha(self, alpha: float) -> OKLCHColor:
        """Return a new color with the alpha replaced."""
        return self.__class__(self._lightness, self._chroma, self._hue, alpha)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OKLCHColor):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(lightness={self._lightness!r}, chroma={self._chroma!r}, "
            f"hue={self._hue!r}, alpha={self._alpha!r})"
        )


# Neutral gray substituted for any color string that fails to parse
DEFAULT_COLOR = OKLCHColor(50, 0, 0, 1)
