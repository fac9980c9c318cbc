"""
OKLab / OKLCH conversions.

Linear RGB -> LMS uses ``M1``, the cube root of LMS -> OKLab uses ``M2``.
The inverse path uses the published inverse matrices rather than
``np.linalg.inv`` so results match other OKLab implementations digit for digit.

Lightness is carried on a 0-100 scale at this module's boundary; the
matrices themselves work on 0-1.
"""
import math
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..utils.num_utils import normalize_hue

M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

M2_INV = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])

M1_INV = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
])

LIGHTNESS_SCALE = 100.0


## Linear RGB <-> OKLab

def np_linear_rgb_to_oklab(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: convert linear-light RGB to OKLab.

    Args:
        r, g, b: array-like or scalar, linear RGB in [0, 1]

    Returns:
        lab: array of shape (..., 3): (L [0,100], a, b)
    """
    rgb = np.stack(np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    ), axis=-1)
    lms = np.cbrt(rgb @ M1.T)
    lab = lms @ M2.T
    lab[..., 0] *= LIGHTNESS_SCALE
    return lab


def np_oklab_to_linear_rgb(L: NDArray, a: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: convert OKLab to linear-light RGB (unclamped).

    Args:
        L: lightness in [0, 100]
        a, b: OKLab opponent axes

    Returns:
        rgb: array of shape (..., 3), may fall outside [0, 1] for out-of-gamut input
    """
    lab = np.stack(np.broadcast_arrays(
        np.asarray(L, dtype=float) / LIGHTNESS_SCALE,
        np.asarray(a, dtype=float),
        np.asarray(b, dtype=float),
    ), axis=-1)
    lms = (lab @ M2_INV.T) ** 3
    return lms @ M1_INV.T


def linear_rgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    L, a, b_ = np_linear_rgb_to_oklab(r, g, b)
    return float(L), float(a), float(b_)


def oklab_to_linear_rgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    r, g, b_ = np_oklab_to_linear_rgb(L, a, b)
    return float(r), float(g), float(b_)


## OKLab <-> OKLCH (Cartesian <-> polar)

def oklab_to_oklch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Cartesian to polar: chroma is ``hypot(a, b)``, hue ``atan2(b, a)`` in [0, 360)."""
    c = math.hypot(a, b)
    h = normalize_hue(math.degrees(math.atan2(b, a)))
    return L, c, h


def oklch_to_oklab(L: float, c: float, h: float) -> Tuple[float, float, float]:
    h_rad = math.radians(h)
    return L, c * math.cos(h_rad), c * math.sin(h_rad)


def np_oklab_to_oklch(L: NDArray, a: NDArray, b: NDArray) -> NDArray:
    """Vectorized :func:`oklab_to_oklch`, returns shape (..., 3)."""
    L, a, b = np.broadcast_arrays(
        np.asarray(L, dtype=float),
        np.asarray(a, dtype=float),
        np.asarray(b, dtype=float),
    )
    c = np.hypot(a, b)
    h = np.degrees(np.arctan2(b, a)) % 360.0
    h = np.where(h >= 360.0, 0.0, h)
    return np.stack([L, c, h], axis=-1)


def np_oklch_to_oklab(L: NDArray, c: NDArray, h: NDArray) -> NDArray:
    """Vectorized :func:`oklch_to_oklab`, returns shape (..., 3)."""
    L, c, h = np.broadcast_arrays(
        np.asarray(L, dtype=float),
        np.asarray(c, dtype=float),
        np.asarray(h, dtype=float),
    )
    h_rad = np.radians(h)
    return np.stack([L, c * np.cos(h_rad), c * np.sin(h_rad)], axis=-1)
