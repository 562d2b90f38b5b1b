"""SVGNotes: typed hand-drawn notes <-> SVG with `svgnote:*` attributes."""

from svgnotes.errors import (
    DocumentError,
    InvalidAttribute,
    InvalidPoint,
    MalformedDocument,
    MissingAttribute,
)
from svgnotes.models.color import Color, ColorParseError
from svgnotes.models.document import Document
from svgnotes.models.element import Element
from svgnotes.models.points import LinePoint, PolylinePoint
from svgnotes.models.shapes import Ellipse, Line, Ngon, Polyline


def parse(text: str) -> Document:
    """Decode SVGNotes document text."""
    return Document.parse(text)


def render(document: Document) -> str:
    """Encode a document to SVGNotes text."""
    return document.render()


__all__ = [
    "parse",
    "render",
    "Document",
    "Element",
    "Line",
    "Ngon",
    "Ellipse",
    "Polyline",
    "LinePoint",
    "PolylinePoint",
    "Color",
    "ColorParseError",
    "DocumentError",
    "MissingAttribute",
    "InvalidAttribute",
    "InvalidPoint",
    "MalformedDocument",
]
