"""Common type aliases and enumerations.

``Color`` is the value stored in each palette slot of an
:class:`blockies.identicon.Identicon`: either a generated
:class:`blockies.palette.HSLColor` or a caller supplied override string that
is passed through untouched.
"""

from enum import IntEnum
from typing import Tuple, Union, TYPE_CHECKING


if TYPE_CHECKING:
    from blockies.palette import HSLColor

Seed = str
Color = Union["HSLColor", str]
RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]


class Cell(IntEnum):
    """Paint category of a single bitmap cell."""

    BACKGROUND = 0
    FOREGROUND = 1
    SPOT = 2
