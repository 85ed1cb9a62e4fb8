"""Identicon assembly.

:func:`generate_identicon` is the single entry point of the deterministic
core. It validates every input up front, seeds one
:class:`blockies.stream.RandomStream`, fills the palette and then the bitmap
from it, and returns a frozen :class:`Identicon`. Equal arguments always give
an equal descriptor; nothing outside the call is read or written apart from
debug logging.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import numpy as np
import numpy.typing as npt
from pyrsistent import PMap, pmap
from pyrsistent.typing import PVector

from blockies.bitmap import generate_bitmap, validate_size
from blockies.palette import css_color, generate_palette, validate_override
from blockies.stream import RandomStream
from blockies.types import Color, Seed


logger = logging.getLogger(__name__)

DEFAULT_SIZE = 8


@dataclass(frozen=True)
class Identicon:
    """Immutable identicon descriptor handed to a renderer.

    Attributes:
        color (Color): Foreground color, painted where a cell is 1.
        bg_color (Color): Background color, fills the whole canvas.
        spot_color (Color): Spot color, painted where a cell is 2.
        bitmap (PVector[int]): Row-major cells, ``size * size`` long.
        size (int): Grid side length in cells.
    """

    color: Color
    bg_color: Color
    spot_color: Color
    bitmap: PVector[int]
    size: int

    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        """Bitmap split into ``size`` rows."""
        return tuple(
            tuple(self.bitmap[r * self.size : (r + 1) * self.size])
            for r in range(self.size)
        )

    def to_array(self) -> npt.NDArray[np.uint8]:
        """Bitmap as a ``(size, size)`` ``uint8`` array."""
        return np.array(self.bitmap, dtype=np.uint8).reshape(self.size, self.size)

    @property
    def description(self) -> PMap[str, Any]:
        """Serializable view with CSS color strings, e.g. for JSON display."""
        return pmap(
            {
                "color": css_color(self.color),
                "bg_color": css_color(self.bg_color),
                "spot_color": css_color(self.spot_color),
                "size": self.size,
                "bitmap": self.bitmap,
            }
        )


def generate_identicon(
    seed: Seed,
    size: int = DEFAULT_SIZE,
    color: Optional[str] = None,
    bg_color: Optional[str] = None,
    spot_color: Optional[str] = None,
) -> Identicon:
    """Derive an identicon from ``seed``.

    Args:
        seed: Any string; the only source of randomness.
        size: Grid side length in cells.
        color: Foreground override, used verbatim without consuming draws.
        bg_color: Background override.
        spot_color: Spot override.

    Returns:
        Identicon: Frozen descriptor.

    Raises:
        TypeError: If ``seed`` is not a string.
        InvalidDimensionError: If ``size`` is not a positive integer.
        InvalidOverrideColorError: If an override cannot be parsed as a color.
    """
    validate_size(size)
    validate_override("color", color)
    validate_override("bg_color", bg_color)
    validate_override("spot_color", spot_color)

    stream = RandomStream.from_seed(seed)
    palette = generate_palette(
        stream, color=color, bg_color=bg_color, spot_color=spot_color
    )
    bitmap = generate_bitmap(size, stream)
    logger.debug("Generated %dx%d identicon for seed %r", size, size, seed)

    return Identicon(
        color=palette.color,
        bg_color=palette.bg_color,
        spot_color=palette.spot_color,
        bitmap=bitmap,
        size=size,
    )
