"""
Tonal Swatch Rendering

Renders a combination as a single PNG strip: one equal-width square per
color, left to right in combination order, fixed height.
"""

import base64
import io
from dataclasses import dataclass
from typing import List, Optional, Sequence

from loguru import logger
from PIL import Image

from tonal.config import config

from ..conversions import hex2rgb, is_hex_color


@dataclass(frozen=True)
class SwatchImage:
    """An encoded swatch strip ready to hand to a transport."""
    name: str
    png_bytes: bytes
    width: int
    height: int

    @property
    def filename(self) -> str:
        return f"{self.name}.png"

    def to_base64(self) -> str:
        return base64.b64encode(self.png_bytes).decode("utf-8")


def validate_swatch_params(hex_colors: Sequence[str], square_size: int) -> None:
    """Validate swatch rendering parameters."""
    if not hex_colors:
        raise ValueError("hex_colors cannot be empty")

    if not config.validate_swatch_size(square_size):
        raise ValueError(f"square_size {square_size} out of range [8, 512]")

    for i, hex_color in enumerate(hex_colors):
        if not is_hex_color(hex_color):
            raise ValueError(f"Invalid hex color format at index {i}: {hex_color!r}")


def create_strip(hex_colors: Sequence[str], square_size: int) -> Image.Image:
    """
    Create a horizontal strip of solid color squares.

    Args:
        hex_colors: Colors to render, left to right
        square_size: Edge length of each square in pixels

    Returns:
        PIL Image of size (square_size * len(hex_colors), square_size)
    """
    strip = Image.new("RGB", (square_size * len(hex_colors), square_size), (255, 255, 255))

    for i, hex_color in enumerate(hex_colors):
        chip = Image.new("RGB", (square_size, square_size), hex2rgb(hex_color))
        strip.paste(chip, (i * square_size, 0))

    return strip


def render_combination(hex_colors: Sequence[str], name: str, square_size: Optional[int] = None) -> SwatchImage:
    """
    Render colors as a PNG swatch strip.

    Args:
        hex_colors: Colors to render, left to right
        name: File stem for the swatch, e.g. "combo1-monochrome"
        square_size: Edge length of each square; defaults to config.SWATCH_SIZE

    Returns:
        SwatchImage holding the PNG bytes and dimensions

    Raises:
        ValueError: If the colors or size are invalid
    """
    if square_size is None:
        square_size = config.SWATCH_SIZE
    validate_swatch_params(hex_colors, square_size)

    strip = create_strip(hex_colors, square_size)

    buffer = io.BytesIO()
    strip.save(buffer, format="PNG")

    logger.debug(f"Rendered swatch {name}: {len(hex_colors)} colors, {strip.width}x{strip.height}")

    return SwatchImage(name=name, png_bytes=buffer.getvalue(), width=strip.width, height=strip.height)


def render_palette(combinations, square_size: Optional[int] = None) -> List[SwatchImage]:
    """
    Render every combination returned by synthesize(), preserving order.

    Args:
        combinations: Sequence of Combination objects
        square_size: Optional square size override

    Returns:
        One SwatchImage per combination, named after the combination
    """
    return [
        render_combination(combo.colors, combo.name, square_size)
        for combo in combinations
    ]
