"""
Tonal Configuration
Manages environment variables and defaults for the palette engine.
"""
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


class Config:
    """Configuration class for Tonal services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("TONAL_LOG_LEVEL", "INFO")

    # Swatch rendering (pixels per color square)
    SWATCH_SIZE: int = int(os.environ.get("TONAL_SWATCH_SIZE", "64"))

    # Seed for the process-wide random source used by the experimental combination
    RANDOM_SEED: Optional[int] = _optional_int("TONAL_RANDOM_SEED")

    @classmethod
    def validate_swatch_size(cls, size: int) -> bool:
        """Validate swatch square size."""
        return 8 <= size <= 512


# Global config instance
config = Config()
