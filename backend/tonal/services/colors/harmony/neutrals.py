"""
Tonal Neutrals and Accents

Fixed neutral tables and accent pools keyed by temperature. The tables are
read-only mappings of frozen records and are shared process-wide.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from .classification import Temperature


@dataclass(frozen=True)
class NeutralPalette:
    """Four neutrals matched to one temperature bucket."""
    dark: str
    mid: str
    light: str
    accent: str


WARM_NEUTRALS = NeutralPalette(
    dark="#5d4037",    # warm brown
    mid="#d4c5b0",     # beige
    light="#f5f5dc",   # light beige
    accent="#a0826d",  # taupe
)

COOL_NEUTRALS = NeutralPalette(
    dark="#2c3e50",    # navy
    mid="#95a5a6",     # cool gray
    light="#ecf0f1",   # light gray
    accent="#607d8b",  # blue gray
)

# Greens and blue-greens get plain grays rather than a warm/cool blend
GRAY_NEUTRALS = NeutralPalette(
    dark="#4a4a4a",
    mid="#c0c0c0",
    light="#f0f0f0",
    accent="#808080",
)

NEUTRAL_TABLES: Mapping[Temperature, NeutralPalette] = MappingProxyType({
    Temperature.WARM: WARM_NEUTRALS,
    Temperature.COOL: COOL_NEUTRALS,
    Temperature.NEUTRAL: GRAY_NEUTRALS,
})

WARM_ACCENTS: Tuple[str, ...] = ("#c0392b", "#e67e22", "#f39c12", "#a0826d")  # red, orange, gold, taupe
COOL_ACCENTS: Tuple[str, ...] = ("#16a085", "#8e44ad", "#34495e", "#5c6bc0")  # emerald, violet, graphite, indigo

ACCENT_POOLS: Mapping[Temperature, Tuple[str, ...]] = MappingProxyType({
    Temperature.WARM: WARM_ACCENTS,
    Temperature.COOL: COOL_ACCENTS,
    Temperature.NEUTRAL: WARM_ACCENTS + COOL_ACCENTS,
})

WHITE = "#ffffff"
BLACK = "#000000"


def select_neutrals(temperature: Temperature) -> NeutralPalette:
    """Return the neutral table for a temperature bucket."""
    return NEUTRAL_TABLES[temperature]


def accent_pool(temperature: Temperature) -> Tuple[str, ...]:
    """Return the accent pool for a temperature bucket (both pools for neutral)."""
    return ACCENT_POOLS[temperature]


def get_neutral_pool_info() -> dict:
    """
    Get information about the neutral tables and accent pools.

    Returns:
        Dictionary with table and pool contents keyed by temperature value
    """
    return {
        "neutrals": {
            temperature.value: {
                "dark": palette.dark,
                "mid": palette.mid,
                "light": palette.light,
                "accent": palette.accent,
            }
            for temperature, palette in NEUTRAL_TABLES.items()
        },
        "accents": {
            temperature.value: list(pool)
            for temperature, pool in ACCENT_POOLS.items()
        },
    }
