"""
Tonal Color Harmony Engine

Channel scaling (hue/saturation/value), lighten/darken/saturate/desaturate
helpers and hue-wheel harmony generators built on the HSV conversions.
All functions take and return hex strings and never mutate shared state.
"""

from typing import List, Optional

from ..conversions import hex2hsv, hsv2hex

CHANNELS = ("hue", "saturation", "value")

# Upper bound each channel approaches under relative scaling
CHANNEL_MAX = {"hue": 360, "saturation": 100, "value": 100}


def degrees(base: float, offset: float) -> float:
    """
    Rotate a hue by offset degrees with a single wrap step.

    The result lies in [0, 360]. Offsets must stay within +/-360; larger
    magnitudes are not wrapped more than once.
    """
    deg = base + offset
    if deg > 360:
        deg -= 360
    elif deg < 0:
        deg += 360
    return deg


def hue_separation(h1: float, h2: float) -> float:
    """
    Calculate the minimum angular separation between two hues.

    Args:
        h1: First hue in degrees
        h2: Second hue in degrees

    Returns:
        Minimum separation in degrees [0, 180]
    """
    diff = abs(h1 - h2) % 360
    return min(diff, 360 - diff)


def _check_channel(channel: str) -> None:
    if channel not in CHANNELS:
        raise ValueError(f"Unknown channel {channel!r}; expected one of {CHANNELS}")


def scale(hex_color: str, amount: float, channel: str = "hue", absolute: bool = False) -> str:
    """
    Move one HSV channel of a color and return the new hex.

    Args:
        hex_color: Source color
        amount: Fraction in [-1, 1], or a percentage when |amount| > 1
        channel: "hue", "saturation" or "value"
        absolute: Set the channel to amount * 100 instead of scaling it

    Returns:
        Hex color with the scaled channel

    Relative scaling moves the channel `amount` of the remaining distance to
    its maximum (360 for hue, 100 otherwise); negative amounts move it down by
    the same proportion of that distance.
    """
    _check_channel(channel)
    h, s, v = hex2hsv(hex_color)
    current = {"hue": h, "saturation": s, "value": v}[channel]

    if abs(amount) > 1:
        amount = amount / 100

    if absolute:
        scaled = amount * 100
    else:
        scaled = current + (CHANNEL_MAX[channel] - current) * amount

    return hsv2hex((
        scaled if channel == "hue" else h,
        scaled if channel == "saturation" else s,
        scaled if channel == "value" else v,
    ))


def lighten(hex_color: str, amount: float, absolute: bool = False) -> str:
    return scale(hex_color, abs(amount), "value", absolute)


def darken(hex_color: str, amount: float, absolute: bool = False) -> str:
    return scale(hex_color, -abs(amount), "value", absolute)


def saturate(hex_color: str, amount: float, absolute: bool = False) -> str:
    return scale(hex_color, abs(amount), "saturation", absolute)


def desaturate(hex_color: str, amount: float, absolute: bool = False) -> str:
    return scale(hex_color, -abs(amount), "saturation", absolute)


def algorithmic(
    hex_color: str,
    count: int = 3,
    channel: str = "hue",
    scope: float = 360,
    rotation: float = 0,
) -> List[str]:
    """
    Generate `count` colors spaced across `scope` on one HSV channel.

    Args:
        hex_color: Base color
        count: Number of colors to generate (>= 1)
        channel: Channel to vary: "hue", "saturation" or "value"
        scope: Span in degrees (hue) or channel units (saturation/value)
        rotation: Hue rotation applied to the arc center

    Returns:
        List of hex colors in generation order

    A full, unrotated hue wheel (scope 360) places `count` points evenly
    around the circle starting at the base hue, so the step is scope / count.
    Every other case spans a bounded arc including both endpoints, so the
    step is scope / (count - 1), and the arc is centered on the base hue
    rotated by `rotation`.
    """
    _check_channel(channel)
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    h, s, v = hex2hsv(hex_color)

    if channel != "hue" or (scope != 360 and scope != 0):
        step = scope / (count - 1) if count > 1 else 0
    else:
        step = scope / count

    if scope == 360:
        start = h
    else:
        start = degrees(degrees(h, rotation), -scope / 2)

    colors = []
    for i in range(count):
        offset = step * i
        if channel == "hue":
            hue = degrees(start, offset)
            colors.append(hsv2hex((0 if hue == 360 else hue, s, v)))
        elif channel == "saturation":
            colors.append(hsv2hex((h, offset, v)))
        else:
            colors.append(hsv2hex((h, s, offset)))

    return colors


def complement(hex_color: str, kind: Optional[str] = None) -> List[str]:
    """
    Complementary harmonies.

    kind=None returns the base color and its 180 degree complement. "split"
    spreads 3 hues over a 180 degree arc centered on the complement, "double"
    spreads 5 hues over the same arc.
    """
    if kind is None:
        return algorithmic(hex_color, count=2, scope=360)
    if kind == "split":
        return algorithmic(hex_color, count=3, scope=180, rotation=180)
    if kind == "double":
        return algorithmic(hex_color, count=5, scope=180, rotation=180)
    raise ValueError(f"Unknown complement kind {kind!r}; expected 'split' or 'double'")


def triadic(hex_color: str) -> List[str]:
    return algorithmic(hex_color)


def tetradic(hex_color: str) -> List[str]:
    return algorithmic(hex_color, count=4)


def pentadic(hex_color: str) -> List[str]:
    return algorithmic(hex_color, count=5)
