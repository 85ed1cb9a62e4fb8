"""Mirrored bitmap generation.

Each row draws ``ceil(size / 2)`` cells; the right half is the reverse of the
first ``size - ceil(size / 2)`` drawn cells. For odd sizes the centre column is
therefore drawn once and never mirrored. Cell values are
``floor(draw * 2.3)``: background and foreground with roughly 43% chance each,
spot with roughly 13%.
"""

import math
from typing import List

from pyrsistent import pvector
from pyrsistent.typing import PVector

from blockies.errors import InvalidDimensionError
from blockies.stream import RandomStream


CELL_SCALE = 2.3


def validate_size(size: object, name: str = "size") -> int:
    """Return ``size`` if it is a positive ``int`` (``bool`` excluded)."""
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise InvalidDimensionError(name, size)
    return size


def mirror_row(half: List[int], size: int) -> List[int]:
    """Complete a row from its drawn left half."""
    mirror_width = size - len(half)
    return half + half[:mirror_width][::-1]


def generate_bitmap(size: int, stream: RandomStream) -> PVector[int]:
    """Draw a ``size`` x ``size`` row-major bitmap of mirrored rows.

    Raises:
        InvalidDimensionError: If ``size`` is not a positive integer.
    """
    validate_size(size)
    half_width = math.ceil(size / 2)

    cells: List[int] = []
    for _ in range(size):
        half = [math.floor(stream.draw() * CELL_SCALE) for _ in range(half_width)]
        cells.extend(mirror_row(half, size))
    return pvector(cells)
