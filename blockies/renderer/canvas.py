import logging
from typing import Dict, Optional

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageColor

from blockies.bitmap import validate_size
from blockies.errors import InvalidOverrideColorError
from blockies.identicon import Identicon
from blockies.palette import HSLColor
from blockies.types import RGBA, Cell, Color


logger = logging.getLogger(__name__)

DEFAULT_SCALE = 4
TRANSPARENT: RGBA = (0, 0, 0, 0)

UInt8Array = npt.NDArray[np.uint8]


def to_rgba(color: Color, slot: str = "color") -> RGBA:
    """Resolve a palette slot to an RGBA tuple.

    Generated colors go through :meth:`HSLColor.rgb`; override strings are
    parsed by Pillow. Strings Pillow cannot parse raise
    :class:`InvalidOverrideColorError` at paint time.
    """
    if isinstance(color, HSLColor):
        r, g, b = color.rgb()
        return (r, g, b, 255)
    if color.strip().lower() == "transparent":
        return TRANSPARENT
    try:
        r, g, b, a = ImageColor.getcolor(color, "RGBA")  # type: ignore[misc]
    except ValueError as exc:
        raise InvalidOverrideColorError(slot, color) from exc
    return (r, g, b, a)


def render(identicon: Identicon, scale: int = DEFAULT_SCALE) -> Image.Image:
    """
    Paints the identicon as an RGBA image of ``size * scale`` pixels per side.
    Cell 1 uses ``color``, cell 2 ``spot_color``, cell 0 stays ``bg_color``.
    Cells are composited over the background, so translucent colors blend.
    """
    validate_size(scale, "scale")

    background = to_rgba(identicon.bg_color, "bg_color")
    # Row index matches the cell value; background cells stay transparent
    palette: UInt8Array = np.zeros((len(Cell), 4), dtype=np.uint8)
    palette[Cell.FOREGROUND] = to_rgba(identicon.color, "color")
    palette[Cell.SPOT] = to_rgba(identicon.spot_color, "spot_color")

    cells: UInt8Array = identicon.to_array()
    # Each cell becomes a scale x scale block
    blocks: UInt8Array = np.repeat(np.repeat(cells, scale, axis=0), scale, axis=1)
    pixels: UInt8Array = palette[blocks]
    canvas = Image.new("RGBA", (blocks.shape[1], blocks.shape[0]), background)

    logger.debug(
        "Rendered %dx%d identicon at scale %d", identicon.size, identicon.size, scale
    )
    return Image.alpha_composite(canvas, Image.fromarray(pixels))


class CanvasRenderer:
    scale: int
    cache: Optional[Dict[Identicon, Image.Image]]

    def __init__(self, scale: int = DEFAULT_SCALE, use_cache: bool = False):
        self.scale = validate_size(scale, "scale")
        self.cache = {} if use_cache else None

    def render(self, identicon: Identicon) -> Image.Image:
        if self.cache is None:
            return render(identicon, scale=self.scale)
        if identicon not in self.cache:
            self.cache[identicon] = render(identicon, scale=self.scale)
        return self.cache[identicon].copy()
