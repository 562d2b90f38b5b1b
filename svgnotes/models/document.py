"""Document: ordered elements, plus parse/render orchestration.

Order is drawing order and is significant for equality: two documents are
equal when they hold pairwise-equal elements at the same positions.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from svgnotes.config import Settings, settings as default_settings
from svgnotes.errors import DocumentError
from svgnotes.models.element import SHAPE_TAGS, Element, Shape
from svgnotes.svg.reader import LxmlTagReader, TagReader
from svgnotes.svg.writer import LxmlSvgWriter, SvgWriter

logger = logging.getLogger(__name__)

_DECODED_TAGS = frozenset(SHAPE_TAGS.values())


class Document(BaseModel):
    elements: list[Element] = Field(default_factory=list)

    @classmethod
    def parse(
        cls,
        text: str,
        reader: TagReader | None = None,
        settings: Settings | None = None,
    ) -> Document:
        """Decode SVGNotes text. The first failing element aborts the whole decode."""
        reader = reader or LxmlTagReader()
        settings = settings or default_settings

        elements: list[Element] = []
        next_id = settings.svgnotes_first_element_id
        for event in reader.read(text):
            if event.tag not in _DECODED_TAGS:
                logger.debug("Skipping <%s>", event.tag)
                continue
            try:
                elements.append(Element.decode(event.tag, event.attributes, next_id))
            except DocumentError as e:
                logger.debug("Element %d <%s> failed to decode: %s", next_id, event.tag, e)
                raise
            next_id += 1

        logger.info("Parsed SVGNotes document: %d elements", len(elements))
        return cls(elements=elements)

    def render(self, writer: SvgWriter | None = None) -> str:
        writer = writer or LxmlSvgWriter()
        logger.debug("Rendering SVGNotes document: %d elements", len(self.elements))
        return writer.render(element.encode() for element in self.elements)

    def next_id(self, settings: Settings | None = None) -> int:
        """Id for the next added shape. An empty document starts at the configured first id."""
        if not self.elements:
            return (settings or default_settings).svgnotes_first_element_id
        return max(e.id for e in self.elements) + 1

    def add(self, shape: Shape, settings: Settings | None = None) -> Element:
        """Append a shape on top of the drawing order and return its element."""
        element = Element(id=self.next_id(settings), shape=shape)
        self.elements.append(element)
        return element

    def remove(self, element_id: int) -> Element:
        for index, element in enumerate(self.elements):
            if element.id == element_id:
                return self.elements.pop(index)
        raise KeyError(element_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self.elements == other.elements

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> Element:
        return self.elements[index]
