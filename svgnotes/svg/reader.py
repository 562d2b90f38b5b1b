"""SVG tag reader: document text -> stream of (tag, attributes) events.

The default implementation is a thin facade over lxml. Tags in the SVG
namespace are reported by local name. Attributes in the SVGNotes namespace
are reported as `svgnote:<local>` whatever prefix the source bound to it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import NamedTuple, Protocol

from lxml import etree

from svgnotes.errors import MalformedDocument
from svgnotes.svg.attributes import SVG_NS, SVGNOTE_NS, SVGNOTE_PREFIX

logger = logging.getLogger(__name__)


class TagEvent(NamedTuple):
    tag: str
    attributes: dict[str, str]


class TagReader(Protocol):
    def read(self, text: str) -> Iterator[TagEvent]: ...


class LxmlTagReader:
    """Yields one TagEvent per element, in document order. Comments and PIs are skipped."""

    def __init__(self) -> None:
        self._parser = etree.XMLParser(
            remove_comments=True,
            remove_pis=True,
            resolve_entities=False,
            no_network=True,
            huge_tree=True,
        )

    def read(self, text: str) -> Iterator[TagEvent]:
        try:
            root = etree.fromstring(text.strip().encode("utf-8"), parser=self._parser)
        except etree.XMLSyntaxError as e:
            raise MalformedDocument(str(e)) from e

        for element in root.iter(etree.Element):
            yield TagEvent(_tag_name(element), _attributes(element))


def _tag_name(element: etree._Element) -> str:
    qname = etree.QName(element)
    if qname.namespace in (None, SVG_NS):
        return qname.localname
    # Foreign elements keep their Clark name so they never match a shape tag.
    return qname.text


def _attributes(element: etree._Element) -> dict[str, str]:
    prefixes = {uri: prefix for prefix, uri in element.nsmap.items() if prefix}
    prefixes[SVGNOTE_NS] = SVGNOTE_PREFIX

    attrs: dict[str, str] = {}
    for key, value in element.attrib.items():
        qname = etree.QName(key)
        if qname.namespace is None:
            attrs[key] = value
        elif qname.namespace in prefixes:
            attrs[f"{prefixes[qname.namespace]}:{qname.localname}"] = value
        else:
            logger.debug("Attribute %s has no bound prefix, keeping Clark name", key)
            attrs[key] = value
    return attrs
