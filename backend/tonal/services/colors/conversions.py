"""
Tonal Color Model Conversions

Pure conversions between hex strings, RGB, HSV and HSL triples. The lenient
conversions never raise: malformed hex falls back to black so that every
derived computation stays total. Use parse_hex() where invalid input should be
reported instead.

Ranges:
    RGB  integers in [0, 255]
    HSV  integer hue in [0, 360), saturation and value in [0, 100]
    HSL  fractional hue, saturation and lightness in [0, 1]
"""

import colorsys
import math
import re
from typing import Sequence, Tuple

RGB = Tuple[int, int, int]
HSV = Tuple[float, float, float]
HSL = Tuple[float, float, float]

BLACK_RGB: RGB = (0, 0, 0)

_SHORTHAND_RE = re.compile(r"#?([0-9a-f])([0-9a-f])([0-9a-f])", re.IGNORECASE)
_HEX_RE = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


class InvalidHexColorError(ValueError):
    """Raised by strict parsing when a value is not a 3- or 6-digit hex color."""


class ColorMathError(RuntimeError):
    """Raised when an internal color-math invariant is broken."""


def round_half_up(x: float) -> int:
    """Round to the nearest integer with halves going up (0.5 -> 1, 2.5 -> 3)."""
    return int(math.floor(x + 0.5))


def _expand_shorthand(hex_color: str) -> str:
    match = _SHORTHAND_RE.fullmatch(hex_color)
    if match:
        r, g, b = match.groups()
        return r + r + g + g + b + b
    return hex_color


def _match_hex(hex_color: str):
    if not isinstance(hex_color, str):
        return None
    return _HEX_RE.fullmatch(_expand_shorthand(hex_color))


def is_hex_color(value: str) -> bool:
    """Return True if value is a 3- or 6-digit hex color, with or without '#'."""
    return _match_hex(value) is not None


def hex2rgb(hex_color: str) -> RGB:
    """
    Convert a hex color to an RGB triple.

    Accepts '#RRGGBB', 'RRGGBB', '#RGB' and 'RGB' in any case. Anything else
    yields black (0, 0, 0).
    """
    match = _match_hex(hex_color)
    if match is None:
        return BLACK_RGB
    return tuple(int(part, 16) for part in match.groups())


def parse_hex(hex_color: str) -> RGB:
    """
    Strictly convert a hex color to an RGB triple.

    Raises:
        InvalidHexColorError: If the value is not a 3- or 6-digit hex color
    """
    match = _match_hex(hex_color)
    if match is None:
        raise InvalidHexColorError(f"Invalid hex color format: {hex_color!r}")
    return tuple(int(part, 16) for part in match.groups())


def rgb2hex(rgb: Sequence[float]) -> str:
    """Convert an RGB triple to a lowercase '#rrggbb' string."""
    channels = [max(0, min(255, int(c))) for c in rgb[:3]]
    return "#" + "".join(f"{c:02x}" for c in channels)


def normalize_hex(hex_color: str) -> str:
    """Canonicalize any hex input to '#rrggbb'; malformed input becomes '#000000'."""
    return rgb2hex(hex2rgb(hex_color))


def rgb2hsv(rgb: Sequence[int]) -> Tuple[int, int, int]:
    """
    Convert an RGB triple to integer HSV.

    Value and saturation are floored percentages, hue is floored degrees.
    Black short-circuits to (0, 0, 0); achromatic colors get hue 0.
    """
    r, g, b = rgb[0], rgb[1], rgb[2]
    lo = min(r, g, b)
    hi = max(r, g, b)
    delta = hi - lo
    v = math.floor(hi / 255 * 100)

    if hi == 0:
        return (0, 0, 0)

    s = math.floor(delta / hi * 100)

    if delta == 0:
        h = 0.0
    elif r == hi:
        h = (g - b) / delta
    elif g == hi:
        h = 2 + (b - r) / delta
    else:
        h = 4 + (r - g) / delta

    h = math.floor(h * 60)
    if h < 0:
        h += 360

    return (h, s, v)


def hsv2rgb(hsv: Sequence[float]) -> RGB:
    """
    Convert HSV (degrees, percent, percent) to an RGB triple.

    Inputs are clamped to their ranges and hue 360 is treated as 0.
    """
    h = max(0, min(360, hsv[0]))
    s = max(0, min(100, hsv[1])) / 100
    v = max(0, min(100, hsv[2])) / 100
    if h == 360:
        h = 0

    if s == 0:
        gray = round_half_up(v * 255)
        return (gray, gray, gray)

    h /= 60
    i = math.floor(h)
    f = h - i
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    if i == 0:
        r, g, b = v, t, p
    elif i == 1:
        r, g, b = q, v, p
    elif i == 2:
        r, g, b = p, v, t
    elif i == 3:
        r, g, b = p, q, v
    elif i == 4:
        r, g, b = t, p, v
    elif i == 5:
        r, g, b = v, p, q
    else:
        raise ColorMathError(f"Hue sector {i} outside 0..5 for hue {hsv[0]}")

    return (round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def rgb2hsl(rgb: Sequence[int]) -> HSL:
    """Convert an RGB triple to fractional HSL, each component in [0, 1]."""
    h, l, s = colorsys.rgb_to_hls(rgb[0] / 255, rgb[1] / 255, rgb[2] / 255)
    return (h, s, l)


def hsl2rgb(hsl: Sequence[float]) -> RGB:
    """Convert fractional HSL to an RGB triple (channels rounded half-up)."""
    r, g, b = colorsys.hls_to_rgb(hsl[0], hsl[2], hsl[1])
    return (round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def hex2hsv(hex_color: str) -> Tuple[int, int, int]:
    return rgb2hsv(hex2rgb(hex_color))


def hsv2hex(hsv: Sequence[float]) -> str:
    return rgb2hex(hsv2rgb(hsv))


def hex2hsl(hex_color: str) -> HSL:
    return rgb2hsl(hex2rgb(hex_color))


def hsl2hex(hsl: Sequence[float]) -> str:
    return rgb2hex(hsl2rgb(hsl))
