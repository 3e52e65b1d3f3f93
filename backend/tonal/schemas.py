"""
Tonal API Schemas
Pydantic models validating the palette synthesizer output contract.
"""
from typing import Annotated, List, Tuple

from pydantic import BaseModel, Field

from tonal.services.colors.harmony.classification import Clarity, Depth, Temperature


HexColor = Annotated[str, Field(pattern=r"^#[0-9a-f]{6}$", description="Hex color code in format #rrggbb")]


class ClassificationModel(BaseModel):
    """Perceptual classification of the input color."""
    temperature: Temperature = Field(..., description="Hue-based temperature bucket")
    depth: Depth = Field(..., description="Value-based depth bucket")
    clarity: Clarity = Field(..., description="Saturation-based clarity bucket")
    hsv: Tuple[int, int, int] = Field(..., description="Integer HSV triple the buckets were derived from")


class CombinationModel(BaseModel):
    """One named three-color wardrobe combination."""
    kind: str = Field(
        ...,
        pattern=r"^(monochrome|neutrals|analogous|classic|experimental)$",
        description="Combination rule that produced the colors"
    )
    name: str = Field(..., description="Stable file stem, e.g. combo1-monochrome")
    colors: List[HexColor] = Field(
        ...,
        min_length=3,
        max_length=3,
        description="Colors ordered left to right as they should be rendered"
    )


class PaletteResponse(BaseModel):
    """Five combinations synthesized for one input color."""
    request_id: str = Field(..., description="Request identifier for tracing")
    input_hex: HexColor = Field(..., description="Normalized input color")
    classification: ClassificationModel
    combinations: List[CombinationModel] = Field(
        ...,
        min_length=5,
        max_length=5,
        description="Monochrome, neutrals, analogous, classic and experimental combinations, in that order"
    )
