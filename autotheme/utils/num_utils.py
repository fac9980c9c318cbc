from typing import Union

RealNumber = Union[int, float]


def clamp01(value: RealNumber) -> float:
    """Clamp a value to the inclusive range ``[0, 1]``."""
    return max(0.0, min(1.0, float(value)))


def normalize_hue(h: RealNumber) -> float:
    """Normalize hue to [0, 360) range."""
    h = float(h) % 360.0
    # -1e-17 % 360 rounds up to 360.0
    return 0.0 if h >= 360.0 else h


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def format_number(value: RealNumber, decimals: int = 3) -> str:
    """
    Shortest decimal form with at most ``decimals`` digits after the point.

    >>> format_number(1.0)
    '1'
    >>> format_number(0.5)
    '0.5'
    >>> format_number(1 / 3)
    '0.333'
    """
    value = round(float(value), decimals)
    if is_close_to_int(value):
        return str(int(round(value)))
    text = f"{value:.{decimals}f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
