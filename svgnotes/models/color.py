"""8-bit RGBA color and its hex text forms."""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

Byte = Annotated[int, Field(ge=0, le=255)]

_HEX_RE = re.compile(r"#([0-9a-fA-F]+)")


class ColorParseError(ValueError):
    pass


def _f2u(value: float) -> int:
    """Fraction of 1.0 to a byte, saturating. NaN maps to 0."""
    scaled = 255 * value
    if not scaled > 0:
        return 0
    if scaled >= 255:
        return 255
    return round(scaled)


class Color(BaseModel):
    """RGBA color. Alpha is always present, even if the source text had none."""

    model_config = ConfigDict(frozen=True)

    r: Byte
    g: Byte
    b: Byte
    a: Byte = 255

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        return cls(r=r, g=g, b=b, a=255)

    @classmethod
    def rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        return cls(r=r, g=g, b=b, a=a)

    @classmethod
    def rgbaf(cls, r: float, g: float, b: float, a: float) -> Color:
        """Build a color from channels given as fractions of 1.0."""
        return cls(r=_f2u(r), g=_f2u(g), b=_f2u(b), a=_f2u(a))

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse `#RGB`, `#RGBA`, `#RRGGBB` or `#RRGGBBAA` (any case).

        Short forms are widened and reparsed: `#RGB` gains an `F` alpha digit,
        `#RGBA` has every digit doubled, `#RRGGBB` gains an `FF` alpha byte.
        """
        match = _HEX_RE.fullmatch(text)
        if match is None:
            raise ColorParseError(f"Not a hex color: {text!r}")
        digits = match.group(1)

        if len(digits) == 3:
            return cls.parse(text + "F")
        if len(digits) == 4:
            return cls.parse("#" + "".join(c * 2 for c in digits))
        if len(digits) == 6:
            return cls.parse(text + "FF")
        if len(digits) == 8:
            r, g, b, a = (int(digits[i:i + 2], 16) for i in range(0, 8, 2))
            return cls(r=r, g=g, b=b, a=a)

        raise ColorParseError(f"Hex color must have 3, 4, 6 or 8 digits: {text!r}")

    def encode(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"

    def encode_opaque(self) -> str:
        """`#RRGGBB` form, for attributes whose opacity lives in a sibling attribute."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def with_opacity(self, opacity: float) -> Color:
        return self.model_copy(update={"a": _f2u(opacity)})

    def opacity(self) -> float:
        return self.a / 255

    def __str__(self) -> str:
        return self.encode()
