"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    presets_registered: int = 0


class GeometryResponse(BaseModel):
    path: str
    view_box: tuple[float, float]
    commands: list[dict] = Field(default_factory=list)
    shape_kind: str = "custom"


class ColorResponse(BaseModel):
    rgba: str
    r: int
    g: int
    b: int
    a: float = 1.0
    hex: str = ""


class OutlineResponse(BaseModel):
    width: float
    color: str
    style: str = "solid"
    dasharray: str = "0"


class ShadowResponse(BaseModel):
    h: float
    v: float
    blur: float
    color: str


class GradientStopResponse(BaseModel):
    pos: float
    color: str


class GradientResponse(BaseModel):
    kind: str = "linear"
    angle: float = 0.0
    stops: list[GradientStopResponse] = Field(default_factory=list)


class ShapeResponse(BaseModel):
    path: str
    view_box: tuple[float, float]
    shape_kind: str
    fill: str | None = None
    gradient: GradientResponse | None = None
    outline: OutlineResponse | None = None
    shadow: ShadowResponse | None = None
    keypoints: list[float] = Field(default_factory=list)


class ShapeBatchResponse(BaseModel):
    shapes: list[ShapeResponse] = Field(default_factory=list)
