"""Attribute names and typed lookups over a tag's raw attribute mapping.

Every lookup raises MissingAttribute when the attribute is absent and
InvalidAttribute (carrying the raw text) when it fails its grammar.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from svgnotes.errors import InvalidAttribute, MissingAttribute
from svgnotes.models.color import Color, ColorParseError
from svgnotes.models.points import parse_point_list
from svgnotes.utils.math_helpers import parse_byte, parse_number

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
SVGNOTE_NS = "https://github.com/ModProg/SVGNotesLib"
SVGNOTE_PREFIX = "svgnote"


def svgnote(local: str) -> str:
    return f"{SVGNOTE_PREFIX}:{local}"


# Custom attributes
TOOL = svgnote("tool")
POINTS = svgnote("points")
WIDTH = svgnote("width")
POSITION = svgnote("position")
RADIUS = svgnote("radius")
SIDES = svgnote("n")
ANGLE = svgnote("angle")
VERSION = svgnote("version")

# Values of svgnote:tool
TOOL_PEN = "pen"
TOOL_NGON = "ngon"

# Static styling written on every stroke
ROUND_CAPS = {"stroke-linecap": "round", "stroke-linejoin": "round"}


def require(attributes: Mapping[str, str], name: str) -> str:
    try:
        return attributes[name]
    except KeyError:
        raise MissingAttribute(name) from None


def require_float(attributes: Mapping[str, str], name: str) -> float:
    value = require(attributes, name)
    try:
        return parse_number(value)
    except ValueError:
        raise InvalidAttribute(name, value) from None


def require_byte(attributes: Mapping[str, str], name: str) -> int:
    value = require(attributes, name)
    try:
        return parse_byte(value)
    except ValueError:
        raise InvalidAttribute(name, value) from None


def require_position(attributes: Mapping[str, str], name: str) -> tuple[float, float]:
    """`x,y` pair. Everything after the first comma belongs to y."""
    value = require(attributes, name)
    x, sep, y = value.partition(",")
    try:
        if not sep:
            raise ValueError(value)
        return (parse_number(x), parse_number(y))
    except ValueError:
        raise InvalidAttribute(name, value) from None


def require_color(attributes: Mapping[str, str], name: str) -> Color:
    """Color attribute, alpha overridden by `<name>-opacity` when that parses.

    An unparsable opacity is ignored and the inline alpha is kept.
    """
    value = require(attributes, name)
    try:
        color = Color.parse(value)
    except ColorParseError:
        raise InvalidAttribute(name, value) from None

    opacity_name = f"{name}-opacity"
    opacity = attributes.get(opacity_name)
    if opacity is None:
        return color
    try:
        return color.with_opacity(parse_number(opacity))
    except ValueError:
        logger.debug("Ignoring malformed %s=%r", opacity_name, opacity)
        return color


def require_points(attributes: Mapping[str, str], name: str, point_type: type) -> list:
    """Point-list attribute. A bad token raises InvalidPoint, not InvalidAttribute."""
    return parse_point_list(require(attributes, name), point_type)
