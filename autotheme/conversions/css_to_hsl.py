"""
CSS HSL <-> gamma-encoded sRGB.

The ``np_`` kernels carry the math and broadcast over arrays; the scalar
helpers used by the hsl parser and renderer are thin wrappers around them.
"""
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

# Channel offsets (r, g, b) of the CSS Color 4 ``f(n)`` hsl formula
_CHANNEL_OFFSETS = np.array([0.0, 8.0, 4.0])


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: HSL to gamma-encoded RGB (CSS Color 4).

    ``f(n) = l - a * max(-1, min(k - 3, 9 - k, 1))`` with
    ``k = (n + h / 30) mod 12`` and ``a = s * min(l, 1 - l)``.

    Args:
        h: array-like or scalar, hue in degrees (wrapped)
        s: array-like or scalar, saturation in [0, 1] (clipped)
        l: array-like or scalar, lightness in [0, 1] (clipped)

    Returns:
        rgb: array of shape (..., 3) in [0, 1]
    """
    h, s, l = np.broadcast_arrays(
        np.asarray(h, dtype=float) % 360,
        np.clip(np.asarray(s, dtype=float), 0.0, 1.0),
        np.clip(np.asarray(l, dtype=float), 0.0, 1.0),
    )
    h, s, l = h[..., None], s[..., None], l[..., None]

    k = (_CHANNEL_OFFSETS + h / 30) % 12
    a = s * np.minimum(l, 1 - l)
    ramp = np.clip(np.minimum(k - 3, 9 - k), -1.0, 1.0)
    return l - a * ramp


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: gamma-encoded RGB to HSL.

    Returns:
        hsl: array of shape (..., 3): hue [0, 360), saturation [0, 1],
        lightness [0, 1]. Achromatic inputs get hue 0 and saturation 0.
    """
    rgb = np.stack(np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    ), axis=-1)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    max_c = rgb.max(axis=-1)
    min_c = rgb.min(axis=-1)
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2

    chromatic = delta > 0
    safe_delta = np.where(chromatic, delta, 1.0)
    spread = 1 - np.abs(2 * lightness - 1)
    saturation = np.where(chromatic, delta / np.where(chromatic, spread, 1.0), 0.0)

    # argmax picks the first maximal channel, so ties resolve r before g before b
    dominant = np.argmax(rgb, axis=-1)
    hue = np.choose(dominant, [
        60 * (g - b) / safe_delta,
        60 * (b - r) / safe_delta + 120,
        60 * (r - g) / safe_delta + 240,
    ]) % 360
    hue = np.where(chromatic & (hue < 360), hue, 0.0)

    return np.stack([hue, np.clip(saturation, 0.0, 1.0), lightness], axis=-1)


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    r, g, b = np_hsl_to_unit_rgb(h, s, l)
    return float(r), float(g), float(b)


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    h, s, l = np_unit_rgb_to_hsl(r, g, b)
    return float(h), float(s), float(l)
