"""Point tuples stored in point-list attributes."""

from __future__ import annotations

from typing import NamedTuple

from svgnotes.errors import InvalidPoint
from svgnotes.utils.geometry import distance
from svgnotes.utils.math_helpers import format_number, parse_number


def _split_fields(token: str, count: int) -> list[float]:
    fields = token.split(",")
    if len(fields) != count:
        raise InvalidPoint(token)
    try:
        return [parse_number(f) for f in fields]
    except ValueError:
        raise InvalidPoint(token) from None


class LinePoint(NamedTuple):
    """One recorded sample of a pen stroke: `x,y,pressure`."""

    x: float
    y: float
    pressure: float

    @classmethod
    def parse(cls, token: str) -> LinePoint:
        return cls(*_split_fields(token, 3))

    def format(self) -> str:
        return f"{format_number(self.x)},{format_number(self.y)},{format_number(self.pressure)}"

    @property
    def xy(self) -> tuple[float, float]:
        return (self.x, self.y)


class PolylinePoint(NamedTuple):
    """Polyline vertex: `x,y`."""

    x: float
    y: float

    @classmethod
    def parse(cls, token: str) -> PolylinePoint:
        return cls(*_split_fields(token, 2))

    def format(self) -> str:
        return f"{format_number(self.x)},{format_number(self.y)}"

    def distance_to(self, other: tuple[float, float]) -> float:
        return distance(self, other)


def parse_point_list(text: str, point_type: type[LinePoint] | type[PolylinePoint]) -> list:
    """Whitespace-separated point tokens. The first bad token aborts the whole list."""
    return [point_type.parse(token) for token in text.split()]


def format_point_list(points) -> str:
    return " ".join(p.format() for p in points)
