"""Color-space conversion to RGB."""

import math
import string

RGB = tuple[int, int, int]

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_rgb(value: str) -> RGB | None:
    """Convert a hex color string to an RGB triple.

    Args:
        value: Six hex digits, optionally preceded by ``#`` (e.g. "#ff8000")

    Returns:
        (r, g, b) tuple, or None if the string is not a valid color

    """
    digits = value.lstrip("#")
    if len(digits) != 6 or not _HEX_DIGITS.issuperset(digits):
        return None

    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def _remainder(a: float, b: float) -> float:
    """Floating remainder with the sign of the dividend; NaN for infinite input."""
    if math.isinf(a):
        return math.nan
    return math.fmod(a, b)


def _hue_segment(sextant: float) -> int:
    """Truncate a hue position to its segment index; non-finite maps outside 0-4."""
    if math.isnan(sextant):
        return 0
    if math.isinf(sextant):
        return -1
    return int(sextant)


def _to_channel(component: float) -> int:
    """Scale a 0-1 component to 0-255, truncating and saturating."""
    scaled = component * 255.0
    if math.isnan(scaled):
        return 0
    return int(min(max(scaled, 0.0), 255.0))


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:  # noqa: E741
    """Convert HSL to an RGB triple.

    Hue is in degrees, saturation and lightness in percent. Values outside
    the usual ranges are not rejected; they go through the same formula.
    Channels are truncated, not rounded.
    """
    h /= 360.0
    s /= 100.0
    l /= 100.0

    c = (1.0 - abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - abs(_remainder(h * 6.0, 2.0) - 1.0))
    m = l - c / 2.0

    match _hue_segment(h * 6.0):
        case 0:
            r, g, b = c, x, 0.0
        case 1:
            r, g, b = x, c, 0.0
        case 2:
            r, g, b = 0.0, c, x
        case 3:
            r, g, b = 0.0, x, c
        case 4:
            r, g, b = x, 0.0, c
        case _:
            r, g, b = c, 0.0, x

    return _to_channel(r + m), _to_channel(g + m), _to_channel(b + m)
