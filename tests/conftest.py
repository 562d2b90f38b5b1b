"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgnotes.models.color import Color
from svgnotes.models.document import Document
from svgnotes.models.points import LinePoint, PolylinePoint
from svgnotes.models.shapes import Ellipse, Line, Ngon, Polyline


# Pen stroke, 4-gon and circle as written by the SVGNotes editor
NOTES_SVG = '''
<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<!-- Created with SVGNotes (https://github.com/ModProg/SVGNotesLib) -->

<svg
   width="100mm"
   height="100mm"
   viewBox="0 0 100 100"
   version="1.1"
   xmlns="http://www.w3.org/2000/svg"
   xmlns:svg="http://www.w3.org/2000/svg"
   xmlns:svgnote="https://github.com/ModProg/SVGNotesLib"
   svgnote:version="0.1"
>
  <g id="foreground">
    <path
       fill="#00000000"
       stroke="#000000"
       stroke-width="4"
       stroke-linecap="round"
       stroke-linejoin="round"
       d="M 10,10 60,30 50,60 90,10"
       svgnote:tool="pen"
       svgnote:width="4"
       svgnote:points="10,10,1 60,30,4 50,60,3 90,10,2"
    />
    <polygon
       fill="#00000000"
       stroke="#FF0000FF"
       stroke-width="3"
       stroke-linecap="round"
       stroke-linejoin="round"
       points="50,50 80,50 80,80 50,80"
       svgnote:tool="ngon"
       svgnote:n="4"
       svgnote:angle="0"
       svgnote:position="65,65"
       svgnote:radius="15"
    />
    <ellipse
       fill="#FFFF0055"
       stroke="#FFFF00FF"
       stroke-width="2"
       cx="65"
       cy="65"
       rx="10"
       ry="10"
    />
  </g>
</svg>
'''

# Same notes with the namespace bound to another prefix, plus a polyline
# and markup that is not a shape.
FOREIGN_PREFIX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg"
     xmlns:n="https://github.com/ModProg/SVGNotesLib"
     xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape"
     viewBox="0 0 100 100">
  <title>notes</title>
  <rect x="0" y="0" width="10" height="10"/>
  <path stroke="#123" n:tool="pen" n:width="1.5" n:points="0,0,0.5 1,1,0.25"/>
  <polyline stroke="#00FF00" stroke-opacity="0.5" fill="#0000" points="0,0 3,4"
            stroke-width="2" inkscape:label="arrow"/>
</svg>'''

# Attribute maps of single shapes, as the editor writes them
LINE_ATTRS = {
    "stroke": "#000000",
    "stroke-width": "4",
    "svgnote:tool": "pen",
    "svgnote:width": "4",
    "svgnote:points": "10,10,1 60,30,4 50,60,3 90,10,2",
}

NGON_ATTRS = {
    "fill": "#00000000",
    "stroke": "#FF0000FF",
    "stroke-width": "3",
    "svgnote:tool": "ngon",
    "svgnote:n": "4",
    "svgnote:angle": "0",
    "svgnote:position": "65,65",
    "svgnote:radius": "15",
}

ELLIPSE_ATTRS = {
    "fill": "#FFFF0055",
    "stroke": "#FFFF00FF",
    "stroke-width": "2",
    "cx": "65",
    "cy": "65",
    "rx": "10",
    "ry": "10",
}

POLYLINE_ATTRS = {
    "stroke": "#00FF00",
    "fill": "#0000",
    "stroke-width": "2",
    "points": "0,0 3,4 6,0",
}

BROKEN_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><path stroke="#000"</svg>'


def sample_document() -> Document:
    """One of each shape variant, with awkward floats."""
    doc = Document()
    doc.add(Line(
        color=Color.rgba(0x12, 0x0F, 0xF0, 0xAA),
        width=2.25,
        points=[LinePoint(0.1, 0.2, 0.3), LinePoint(-1e-7, 1234.5678, 1 / 3), LinePoint(1e20, -0.0, 7)],
    ))
    doc.add(Ngon(
        position=(65.0, 65.0),
        stroke=Color.rgb(0xFF, 0, 0),
        fill=Color.rgba(0, 0, 0, 0),
        width=3.0,
        angle=0.7853981633974483,
        n=5,
        radius=20.123,
    ))
    doc.add(Ellipse(
        position=(-3.5, 1 / 7),
        stroke=Color.rgba(0xFF, 0xFF, 0, 0x01),
        fill=Color.rgba(0xFF, 0xFF, 0, 0x55),
        width=0.001,
        radius=10.0,
    ))
    doc.add(Polyline(
        stroke=Color.rgb(1, 2, 3),
        fill=Color.rgba(4, 5, 6, 254),
        width=1.0,
        points=[PolylinePoint(0.0, 0.0), PolylinePoint(3.0, 4.0), PolylinePoint(2 / 3, 9.99)],
    ))
    return doc


@pytest.fixture
def notes_svg() -> str:
    return NOTES_SVG


@pytest.fixture
def foreign_prefix_svg() -> str:
    return FOREIGN_PREFIX_SVG


@pytest.fixture
def document() -> Document:
    return sample_document()
