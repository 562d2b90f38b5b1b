"""The four drawable shape variants and their attribute codecs.

Each shape decodes from a tag's raw attributes (`from_attributes`) and
encodes back to them (`to_attributes`). Encoding writes two layers:
attributes a generic SVG viewer renders (opaque colors, separate opacity,
geometry, round caps) and `svgnote:*` attributes that carry the exact
logical fields, so decoding an encoded shape yields an equal shape.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, Field

from svgnotes.models.color import Byte, Color
from svgnotes.models.points import LinePoint, PolylinePoint, format_point_list
from svgnotes.svg import attributes as attrs
from svgnotes.utils.geometry import regular_polygon_vertices
from svgnotes.utils.math_helpers import format_number


def _stroke_attributes(stroke: Color, width: float) -> dict[str, str]:
    return {
        "stroke": stroke.encode_opaque(),
        "stroke-opacity": format_number(stroke.opacity()),
        "stroke-width": format_number(width),
    }


def _fill_attributes(fill: Color) -> dict[str, str]:
    return {
        "fill": fill.encode_opaque(),
        "fill-opacity": format_number(fill.opacity()),
    }


class Line(BaseModel):
    """Freehand pen stroke. Point order is drawing order."""

    kind: Literal["line"] = "line"
    color: Color
    width: float
    points: list[LinePoint] = Field(default_factory=list)

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> Line:
        return cls(
            color=attrs.require_color(attributes, "stroke"),
            points=attrs.require_points(attributes, attrs.POINTS, LinePoint),
            width=attrs.require_float(attributes, attrs.WIDTH),
        )

    def to_attributes(self) -> dict[str, str]:
        out = {"fill": "none", **_stroke_attributes(self.color, self.width)}
        if self.points:
            out["d"] = "M " + " ".join(
                ",".join(map(format_number, p.xy)) for p in self.points
            )
        out.update(attrs.ROUND_CAPS)
        out[attrs.TOOL] = attrs.TOOL_PEN
        out[attrs.WIDTH] = format_number(self.width)
        out[attrs.POINTS] = format_point_list(self.points)
        return out


class Ngon(BaseModel):
    """Regular polygon. Vertices are derived from position/radius/angle/n on encode."""

    kind: Literal["ngon"] = "ngon"
    position: tuple[float, float]
    stroke: Color
    fill: Color
    width: float
    angle: float = 0.0  # radians
    n: Byte
    radius: float

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> Ngon:
        return cls(
            position=attrs.require_position(attributes, attrs.POSITION),
            width=attrs.require_float(attributes, "stroke-width"),
            radius=attrs.require_float(attributes, attrs.RADIUS),
            n=attrs.require_byte(attributes, attrs.SIDES),
            angle=attrs.require_float(attributes, attrs.ANGLE),
            fill=attrs.require_color(attributes, "fill"),
            stroke=attrs.require_color(attributes, "stroke"),
        )

    def vertices(self) -> list[PolylinePoint]:
        """Polygon corners, pointy-top at angle 0. Requires n >= 1."""
        return [
            PolylinePoint(x, y)
            for x, y in regular_polygon_vertices(self.position, self.radius, self.angle, self.n)
        ]

    def to_attributes(self) -> dict[str, str]:
        # n == 0 has no vertices to derive; the svgnote:* fields still round-trip.
        corners = self.vertices() if self.n else []
        x, y = self.position
        return {
            **_fill_attributes(self.fill),
            **_stroke_attributes(self.stroke, self.width),
            **attrs.ROUND_CAPS,
            "points": format_point_list(corners),
            attrs.TOOL: attrs.TOOL_NGON,
            attrs.SIDES: str(self.n),
            attrs.ANGLE: format_number(self.angle),
            attrs.POSITION: f"{format_number(x)},{format_number(y)}",
            attrs.RADIUS: format_number(self.radius),
        }


class Ellipse(BaseModel):
    """Circle: one radius drives both axes."""

    kind: Literal["ellipse"] = "ellipse"
    position: tuple[float, float]
    stroke: Color
    fill: Color
    width: float
    radius: float

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> Ellipse:
        return cls(
            position=(
                attrs.require_float(attributes, "cx"),
                attrs.require_float(attributes, "cy"),
            ),
            width=attrs.require_float(attributes, "stroke-width"),
            radius=attrs.require_float(attributes, "rx"),
            fill=attrs.require_color(attributes, "fill"),
            stroke=attrs.require_color(attributes, "stroke"),
        )

    def to_attributes(self) -> dict[str, str]:
        x, y = self.position
        radius = format_number(self.radius)
        return {
            **_fill_attributes(self.fill),
            **_stroke_attributes(self.stroke, self.width),
            "cx": format_number(x),
            "cy": format_number(y),
            "rx": radius,
            "ry": radius,
        }


class Polyline(BaseModel):
    kind: Literal["polyline"] = "polyline"
    stroke: Color
    fill: Color
    width: float
    points: list[PolylinePoint] = Field(default_factory=list)

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> Polyline:
        return cls(
            stroke=attrs.require_color(attributes, "stroke"),
            fill=attrs.require_color(attributes, "fill"),
            points=attrs.require_points(attributes, "points", PolylinePoint),
            width=attrs.require_float(attributes, "stroke-width"),
        )

    def length(self) -> float:
        """Total length of the polyline's segments."""
        return sum(a.distance_to(b) for a, b in zip(self.points, self.points[1:]))

    def to_attributes(self) -> dict[str, str]:
        return {
            **_stroke_attributes(self.stroke, self.width),
            **_fill_attributes(self.fill),
            "points": format_point_list(self.points),
            **attrs.ROUND_CAPS,
        }
