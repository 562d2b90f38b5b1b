"""Write SVGNotes document text from encoded (tag, attributes) elements."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Protocol

from lxml import etree

from svgnotes.svg.attributes import SVG_NS, SVGNOTE_NS, SVGNOTE_PREFIX, VERSION

HEADER_COMMENT = " Created with SVGNotes (https://github.com/ModProg/SVGNotesLib) "
FORMAT_VERSION = "0.1"

# Canvas attributes of the root <svg>. They carry nothing from the elements.
CANVAS = {
    "width": "100mm",
    "height": "100mm",
    "viewBox": "0 0 2000 2000",
    "version": "1.1",
}

_NSMAP = {None: SVG_NS, SVGNOTE_PREFIX: SVGNOTE_NS}


class SvgWriter(Protocol):
    def render(self, elements: Iterable[tuple[str, Mapping[str, str]]]) -> str: ...


class LxmlSvgWriter:
    """Renders elements, in order, under the fixed SVGNotes root and preamble."""

    def __init__(self, pretty_print: bool = True) -> None:
        self.pretty_print = pretty_print

    def render(self, elements: Iterable[tuple[str, Mapping[str, str]]]) -> str:
        root = etree.Element(_svg(SVG_NS, "svg"), nsmap=_NSMAP)
        for name, value in CANVAS.items():
            root.set(name, value)
        root.set(_attribute_key(VERSION), FORMAT_VERSION)
        root.addprevious(etree.Comment(HEADER_COMMENT))

        for tag, attributes in elements:
            child = etree.SubElement(root, _svg(SVG_NS, tag))
            for name, value in attributes.items():
                child.set(_attribute_key(name), value)

        data = etree.tostring(
            root.getroottree(),
            xml_declaration=True,
            encoding="UTF-8",
            standalone=False,
            pretty_print=self.pretty_print,
        )
        return data.decode("utf-8")


def _svg(namespace: str, local: str) -> str:
    return f"{{{namespace}}}{local}"


def _attribute_key(name: str) -> str:
    """`prefix:local` -> Clark name for prefixes the writer binds; others unchanged."""
    prefix, sep, local = name.partition(":")
    if sep and prefix in _NSMAP:
        return _svg(_NSMAP[prefix], local)
    return name
