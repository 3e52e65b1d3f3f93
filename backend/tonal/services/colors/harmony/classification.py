"""
Tonal Color Classification

Classifies a color along three perceptual axes used by the wardrobe rules:
temperature (warm/cool/neutral), depth (deep/light/mid) and clarity
(clear/soft/mid). Classification is a pure function of the HSV triple.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple

from ..conversions import hex2hsv


class Temperature(str, Enum):
    """Hue-based temperature bucket."""
    WARM = "warm"        # reds, oranges, yellows, magentas
    COOL = "cool"        # cyans, blues, violets
    NEUTRAL = "neutral"  # greens and blue-greens


class Depth(str, Enum):
    """Value-based depth bucket."""
    DEEP = "deep"
    LIGHT = "light"
    MID = "mid"


class Clarity(str, Enum):
    """Saturation-based clarity bucket."""
    CLEAR = "clear"
    SOFT = "soft"
    MID = "mid"


# Thresholds (HSV percent / degrees)
DEEP_VALUE_BELOW = 50
LIGHT_VALUE_ABOVE = 70
CLEAR_SATURATION_ABOVE = 60
SOFT_SATURATION_BELOW = 40


@dataclass(frozen=True)
class ColorClassification:
    """Derived perceptual attributes of a single color."""
    temperature: Temperature
    depth: Depth
    clarity: Clarity
    hsv: Tuple[int, int, int]

    @property
    def is_warm(self) -> bool:
        return self.temperature == Temperature.WARM

    @property
    def is_cool(self) -> bool:
        return self.temperature == Temperature.COOL

    @property
    def is_deep(self) -> bool:
        return self.depth == Depth.DEEP

    @property
    def is_light(self) -> bool:
        return self.depth == Depth.LIGHT

    @property
    def is_clear(self) -> bool:
        return self.clarity == Clarity.CLEAR

    @property
    def is_soft(self) -> bool:
        return self.clarity == Clarity.SOFT


def classify_temperature(hue: float) -> Temperature:
    """Warm on [0, 60] and [300, 360], cool on [180, 300] (300 is warm), neutral in between."""
    if 0 <= hue <= 60 or 300 <= hue <= 360:
        return Temperature.WARM
    if 180 <= hue <= 300:
        return Temperature.COOL
    return Temperature.NEUTRAL


def classify_depth(value: float) -> Depth:
    if value < DEEP_VALUE_BELOW:
        return Depth.DEEP
    if value > LIGHT_VALUE_ABOVE:
        return Depth.LIGHT
    return Depth.MID


def classify_clarity(saturation: float) -> Clarity:
    if saturation > CLEAR_SATURATION_ABOVE:
        return Clarity.CLEAR
    if saturation < SOFT_SATURATION_BELOW:
        return Clarity.SOFT
    return Clarity.MID


def classify_hsv(hsv: Sequence[int]) -> ColorClassification:
    """
    Classify an HSV triple.

    Args:
        hsv: (hue degrees, saturation percent, value percent)

    Returns:
        ColorClassification carrying the three buckets and the source triple
    """
    h, s, v = hsv[0], hsv[1], hsv[2]
    return ColorClassification(
        temperature=classify_temperature(h),
        depth=classify_depth(v),
        clarity=classify_clarity(s),
        hsv=(h, s, v),
    )


def classify(hex_color: str) -> ColorClassification:
    """Classify a hex color (malformed input classifies as black)."""
    return classify_hsv(hex2hsv(hex_color))
