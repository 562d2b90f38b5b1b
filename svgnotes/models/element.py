"""Element: one shape of a document plus its document-local id."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Union

from pydantic import BaseModel, Field

from svgnotes.errors import InvalidAttribute, UnknownEvent
from svgnotes.models.shapes import Ellipse, Line, Ngon, Polyline
from svgnotes.svg import attributes as attrs

Shape = Annotated[Union[Line, Ngon, Ellipse, Polyline], Field(discriminator="kind")]

# shape kind -> SVG tag it is written as
SHAPE_TAGS = {
    "line": "path",
    "ngon": "polygon",
    "ellipse": "ellipse",
    "polyline": "polyline",
}


def _require_tool(attributes: Mapping[str, str], expected: str) -> None:
    tool = attrs.require(attributes, attrs.TOOL)
    if tool != expected:
        raise InvalidAttribute(attrs.TOOL, tool)


class Element(BaseModel):
    id: int
    shape: Shape

    @classmethod
    def decode(cls, tag: str, attributes: Mapping[str, str], element_id: int) -> Element:
        """Dispatch on tag name; `path` and `polygon` also need a matching svgnote:tool."""
        if tag == "path":
            _require_tool(attributes, attrs.TOOL_PEN)
            shape = Line.from_attributes(attributes)
        elif tag == "polygon":
            _require_tool(attributes, attrs.TOOL_NGON)
            shape = Ngon.from_attributes(attributes)
        elif tag == "polyline":
            shape = Polyline.from_attributes(attributes)
        elif tag == "ellipse":
            shape = Ellipse.from_attributes(attributes)
        else:
            raise UnknownEvent(tag)
        return cls(id=element_id, shape=shape)

    def encode(self) -> tuple[str, dict[str, str]]:
        return SHAPE_TAGS[self.shape.kind], self.shape.to_attributes()

    def __eq__(self, other: object) -> bool:
        # ids are renumbered on every decode; only the shape is compared.
        if not isinstance(other, Element):
            return NotImplemented
        return self.shape == other.shape
