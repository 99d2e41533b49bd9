from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class CanvasGrid(BaseModel):
    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)


class ThreadRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    rgb: Tuple[int, int, int]
    brand: str = "DMC"
    symbol: str | None = None

    @property
    def hex(self) -> str:
        r, g, b = self.rgb
        return f"#{r:02X}{g:02X}{b:02X}"


class Stitch(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)
    thread: ThreadRef


class ColorUsage(BaseModel):
    model_config = ConfigDict(frozen=True)

    thread: ThreadRef
    count: int = Field(..., ge=1)


class Pattern(BaseModel):
    canvasGrid: CanvasGrid
    stitches: List[Stitch] = Field(default_factory=list)
    # keyed by thread id, in order of first discovery
    colorUsage: Dict[str, ColorUsage] = Field(default_factory=dict)
    meta: dict[str, Any] = Field(default_factory=dict)
