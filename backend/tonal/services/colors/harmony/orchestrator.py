"""
Tonal Wardrobe Palette Synthesizer

Classifies an input color and derives five named three-color combinations:
monochrome, neutrals, analogous, classic and experimental. The first four are
deterministic; the experimental one draws twice from an injected random
source (hue offset and accent) so repeated calls can offer a fresh idea.
"""

import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol, Sequence, Tuple, TypeVar

from tonal.config import config
from tonal.schemas import ClassificationModel, CombinationModel, PaletteResponse
from tonal.utils.ids import generate_request_id
from tonal.utils.logging import get_logger

from ..conversions import hsv2hex, normalize_hex, hex2hsv, is_hex_color
from . import darken, degrees, desaturate, lighten
from .classification import ColorClassification, classify_hsv
from .neutrals import BLACK, WHITE, accent_pool, select_neutrals

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can pick one element of a sequence (random.Random does)."""

    def choice(self, seq: Sequence[T]) -> T:
        ...


class CombinationKind(str, Enum):
    """Combination rules, in output order."""
    MONOCHROME = "monochrome"
    NEUTRALS = "neutrals"
    ANALOGOUS = "analogous"
    CLASSIC = "classic"
    EXPERIMENTAL = "experimental"


COMBINATION_ORDER = tuple(CombinationKind)

# Discrete near-complement offsets for the experimental combination
EXPERIMENTAL_HUE_OFFSETS: Tuple[int, int] = (150, 180)

ANALOGOUS_OFFSETS: Tuple[int, int] = (30, -25)


@dataclass(frozen=True)
class Combination:
    """An ordered triple of hex colors produced by one rule."""
    kind: CombinationKind
    colors: Tuple[str, str, str]

    @property
    def index(self) -> int:
        return COMBINATION_ORDER.index(self.kind) + 1

    @property
    def name(self) -> str:
        return f"combo{self.index}-{self.kind.value}"


_default_rng = random.Random(config.RANDOM_SEED)


def monochrome(base_hex: str) -> Tuple[str, str, str]:
    """Base, lightened by 25 and darkened by 20 on the value channel."""
    return (base_hex, lighten(base_hex, 25), darken(base_hex, 20))


def neutrals_combination(base_hex: str, info: ColorClassification) -> Tuple[str, str, str]:
    """Base with temperature-matched neutrals; deep colors take the dark neutral."""
    palette = select_neutrals(info.temperature)
    return (base_hex, palette.dark if info.is_deep else palette.mid, palette.light)


def _analogous_saturation(saturation: int, info: ColorClassification) -> int:
    if info.is_soft:
        return max(saturation - 5, 20)
    return max(saturation - 10, 30)


def analogous(base_hex: str, info: ColorClassification) -> Tuple[str, str, str]:
    """Base with two slightly muted neighbours at +30 and -25 degrees."""
    h, s, v = info.hsv
    sat = _analogous_saturation(s, info)
    first, second = (hsv2hex((degrees(h, offset), sat, v)) for offset in ANALOGOUS_OFFSETS)
    return (base_hex, first, second)


def classic(base_hex: str, info: ColorClassification) -> Tuple[str, str, str]:
    """Contrast pairing: deep colors go with white and black, others with neutrals."""
    palette = select_neutrals(info.temperature)
    second = WHITE if info.is_deep else palette.light
    if info.is_light:
        third = palette.dark
    elif info.is_deep:
        third = BLACK
    else:
        third = palette.dark
    return (base_hex, second, third)


def experimental(base_hex: str, info: ColorClassification, rng: RandomSource) -> Tuple[str, str, str]:
    """
    Base, a muted near-complement and a temperature-matched accent.

    The near-complement sits 150 or 180 degrees away (one draw), with
    saturation lowered by 20 (not below 30) and value raised by 10 (not above
    85), then desaturated by 15 for clear colors or 25 otherwise. The accent
    is one draw from the temperature's accent pool.
    """
    h, s, v = info.hsv
    offset = rng.choice(EXPERIMENTAL_HUE_OFFSETS)
    near_complement = desaturate(
        hsv2hex((degrees(h, offset), max(s - 20, 30), min(v + 10, 85))),
        15 if info.is_clear else 25,
    )
    accent = rng.choice(accent_pool(info.temperature))
    return (base_hex, near_complement, accent)


def synthesize(input_hex: str, rng: Optional[RandomSource] = None) -> List[Combination]:
    """
    Build the five wardrobe combinations for a color.

    Args:
        input_hex: User-supplied color, with or without '#'; malformed input
            is treated as black
        rng: Random source for the experimental combination; defaults to the
            process-wide source seeded from TONAL_RANDOM_SEED

    Returns:
        Five combinations in fixed order: monochrome, neutrals, analogous,
        classic, experimental
    """
    rng = rng if rng is not None else _default_rng
    if not is_hex_color(input_hex):
        get_logger().warning("Malformed hex input, using black", {"input_hex": input_hex})
    base_hex = normalize_hex(input_hex)
    info = classify_hsv(hex2hsv(base_hex))

    get_logger().debug("Classified base color", {
        "input_hex": base_hex,
        "hsv": list(info.hsv),
        "temperature": info.temperature.value,
        "depth": info.depth.value,
        "clarity": info.clarity.value,
    })

    return [
        Combination(CombinationKind.MONOCHROME, monochrome(base_hex)),
        Combination(CombinationKind.NEUTRALS, neutrals_combination(base_hex, info)),
        Combination(CombinationKind.ANALOGOUS, analogous(base_hex, info)),
        Combination(CombinationKind.CLASSIC, classic(base_hex, info)),
        Combination(CombinationKind.EXPERIMENTAL, experimental(base_hex, info, rng)),
    ]


def synthesize_response(input_hex: str, rng: Optional[RandomSource] = None) -> PaletteResponse:
    """
    Synthesize combinations and package them as a validated PaletteResponse.

    Args:
        input_hex: User-supplied color
        rng: Optional random source, see synthesize()

    Returns:
        PaletteResponse with classification, five combinations and a request id
    """
    request_id = generate_request_id()
    start_time = time.time()

    base_hex = normalize_hex(input_hex)
    combinations = synthesize(input_hex, rng)
    info = classify_hsv(hex2hsv(base_hex))

    response = PaletteResponse(
        request_id=request_id,
        input_hex=base_hex,
        classification=ClassificationModel(
            temperature=info.temperature,
            depth=info.depth,
            clarity=info.clarity,
            hsv=info.hsv,
        ),
        combinations=[
            CombinationModel(kind=combo.kind.value, name=combo.name, colors=list(combo.colors))
            for combo in combinations
        ],
    )

    get_logger().info("Palette synthesized", {
        "request_id": request_id,
        "input_hex": base_hex,
        "processing_time_ms": round((time.time() - start_time) * 1000, 2),
    })

    return response
