from typing import Annotated, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..core.types import DitheringAlgorithm, PatternShape
from ..settings import DEFAULT_TOLERANCE

Channel = Annotated[int, Field(ge=0, le=255)]


class ConversionOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    remove_background: bool = False
    background_color: Optional[Tuple[Channel, Channel, Channel]] = None
    tolerance: float = Field(DEFAULT_TOLERANCE, ge=0)
    use_dithering: bool = False
    dithering_algorithm: DitheringAlgorithm = "floyd-steinberg"
    max_colors: Optional[int] = Field(None, gt=0)
    merge_tolerance: Optional[float] = Field(None, ge=0)
    shape: PatternShape = "rectangle"


class BackgroundColor(BaseModel):
    rgb: Tuple[int, int, int]
    hex: str
