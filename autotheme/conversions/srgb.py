"""sRGB transfer function (gamma encoding and decoding)."""
import numpy as np
from numpy import ndarray as NDArray

# Piecewise breakpoints of the sRGB transfer curve
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4


def srgb_to_linear(c: float) -> float:
    """Remove sRGB gamma from a channel in [0, 1]."""
    if c <= SRGB_DECODE_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** SRGB_GAMMA


def linear_to_srgb(c: float) -> float:
    """Apply sRGB gamma to a linear-light channel."""
    if c <= SRGB_ENCODE_THRESHOLD:
        return 12.92 * c
    return 1.055 * c ** (1 / SRGB_GAMMA) - 0.055


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized :func:`srgb_to_linear`."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c <= SRGB_DECODE_THRESHOLD,
        c / 12.92,
        ((np.maximum(c, SRGB_DECODE_THRESHOLD) + 0.055) / 1.055) ** SRGB_GAMMA,
    )


def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized :func:`linear_to_srgb`."""
    c = np.asarray(c, dtype=float)
    # np.where evaluates both branches; keep the power branch off negative bases
    return np.where(
        c <= SRGB_ENCODE_THRESHOLD,
        12.92 * c,
        1.055 * np.maximum(c, SRGB_ENCODE_THRESHOLD) ** (1 / SRGB_GAMMA) - 0.055,
    )
