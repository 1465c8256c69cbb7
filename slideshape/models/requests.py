"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from slideshape.engine.commands import ArcTo, Close, CubicCurveTo, LineTo, MoveTo, PathCommand


class PathCommandModel(BaseModel):
    type: Literal["move", "line", "cubic", "arc", "close"]
    x: float = 0.0
    y: float = 0.0
    c1: tuple[float, float] | None = None
    c2: tuple[float, float] | None = None
    radius_x: float = 0.0
    radius_y: float = 0.0
    start_angle: float = Field(default=0.0, description="Degrees")
    sweep_angle: float = Field(default=0.0, description="Degrees, positive is clockwise")

    def to_command(self) -> PathCommand:
        if self.type == "move":
            return MoveTo(self.x, self.y)
        if self.type == "line":
            return LineTo(self.x, self.y)
        if self.type == "cubic":
            return CubicCurveTo(self.c1 or (self.x, self.y), self.c2 or (self.x, self.y), (self.x, self.y))
        if self.type == "arc":
            return ArcTo(self.radius_x, self.radius_y, self.start_angle, self.sweep_angle)
        return Close()


class GeometryRequest(BaseModel):
    preset_id: str | None = Field(default=None, description="Preset shape id, e.g. 'roundRect'")
    width: float | None = Field(default=None, description="Target box width in points")
    height: float | None = Field(default=None, description="Target box height in points")
    adjustments: dict[str, float] = Field(default_factory=dict)
    custom_commands: list[PathCommandModel] | None = Field(
        default=None,
        description="Design-space commands, used instead of the preset when usable",
    )
    design_width: float = 0.0
    design_height: float = 0.0


class ColorRequest(BaseModel):
    xml: str = Field(..., description="A single color element, e.g. <srgbClr val=\"FF0000\"/>")
    theme: dict[str, str] | None = Field(default=None, description="Theme slot → hex")
    placeholder: str | None = Field(default=None, description="Hex used for phClr")


class ShapeRequest(BaseModel):
    xml: str = Field(..., description="A shape (sp) element")
    theme: dict[str, str] | None = Field(default=None, description="Theme slot → hex")
    theme_xml: str | None = Field(default=None, description="A theme element, for line styles and the palette")


class ShapeBatchRequest(BaseModel):
    shapes: list[str] = Field(..., description="Shape (sp) elements, resolved in order")
    theme: dict[str, str] | None = Field(default=None, description="Theme slot → hex")
    theme_xml: str | None = Field(default=None, description="A theme element, for line styles and the palette")
