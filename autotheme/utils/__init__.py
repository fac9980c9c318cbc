from .num_utils import clamp01, normalize_hue, is_close_to_int, format_number

__all__ = ["clamp01", "normalize_hue", "is_close_to_int", "format_number"]
