"""Palette generation.

A palette holds three colors: foreground (``color``), background
(``bg_color``) and spot (``spot_color``). Slots are filled in that fixed order
from the shared :class:`blockies.stream.RandomStream`. A slot with an override
keeps the override verbatim and consumes no draws, so every later slot (and the
bitmap) reads the stream from an earlier position than it would without the
override.

Generated colors are HSL:

* hue spans the whole color wheel;
* saturation lies in ``[40, 100)`` which avoids greyish results;
* lightness is the sum of four draws, a bell curve centred on 50%.
"""

import colorsys
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from blockies.errors import InvalidOverrideColorError
from blockies.stream import RandomStream
from blockies.types import RGB, Color


def format_number(value: float) -> str:
    """Format ``value`` the way a JavaScript ``Number`` prints.

    Integral values drop the fractional part (``40`` rather than ``40.0``) and
    magnitudes below ``1e-6`` switch to exponent form without zero padding
    (``1.5e-7``). Digits are the shortest round-trip representation.
    """
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if abs(value) < 1e-6:
        mantissa, exponent = text.split("e")
        return f"{mantissa}e{int(exponent)}"
    return format(Decimal(text), "f")


@dataclass(frozen=True)
class HSLColor:
    """Generated color.

    Attributes:
        hue: Integer degrees in ``[0, 360)``.
        saturation: Percent in ``[40, 100)``.
        lightness: Percent in ``[0, 100)``.
    """

    hue: int
    saturation: float
    lightness: float

    def css(self) -> str:
        """CSS ``hsl()`` string, identical to the reference color strings."""
        return (
            f"hsl({self.hue},{format_number(self.saturation)}%,"
            f"{format_number(self.lightness)}%)"
        )

    def rgb(self) -> RGB:
        """8-bit RGB triple, rounded the same way CSS color parsers do."""
        r, g, b = colorsys.hls_to_rgb(
            self.hue / 360.0, self.lightness / 100.0, self.saturation / 100.0
        )
        return (int(r * 255 + 0.5), int(g * 255 + 0.5), int(b * 255 + 0.5))

    def __str__(self) -> str:
        return self.css()


@dataclass(frozen=True)
class Palette:
    color: Color
    bg_color: Color
    spot_color: Color


def css_color(color: Color) -> str:
    """Return the CSS form of a palette slot (overrides pass through)."""
    return color.css() if isinstance(color, HSLColor) else color


def validate_override(slot: str, value: Optional[str]) -> None:
    """Check that an override is a string.

    The string itself is opaque here: any CSS color is passed through to the
    renderer, which reports colors it cannot paint. ``None`` and ``""`` both
    mean "no override".

    Raises:
        InvalidOverrideColorError: If ``value`` is not a string.
    """
    if value is None or isinstance(value, str):
        return
    raise InvalidOverrideColorError(slot, value)


def create_color(stream: RandomStream) -> HSLColor:
    """Draw one HSL color (six draws)."""
    hue = math.floor(stream.draw() * 360)
    saturation = stream.draw() * 60 + 40
    lightness = (stream.draw() + stream.draw() + stream.draw() + stream.draw()) * 25
    return HSLColor(hue=hue, saturation=saturation, lightness=lightness)


def generate_palette(
    stream: RandomStream,
    color: Optional[str] = None,
    bg_color: Optional[str] = None,
    spot_color: Optional[str] = None,
) -> Palette:
    """Fill the three palette slots in order, drawing only for missing ones.

    Args:
        stream: Shared random stream; advanced by six draws per generated slot.
        color: Foreground override.
        bg_color: Background override.
        spot_color: Spot override.

    Returns:
        Palette: Overrides verbatim, generated :class:`HSLColor` elsewhere.
    """
    # order matters: each generated slot consumes draws from the same stream
    resolved_color: Color = color if color else create_color(stream)
    resolved_bg_color: Color = bg_color if bg_color else create_color(stream)
    resolved_spot_color: Color = spot_color if spot_color else create_color(stream)
    return Palette(
        color=resolved_color,
        bg_color=resolved_bg_color,
        spot_color=resolved_spot_color,
    )
