"""Deterministic seeded identicons ("blockies").

The public entry point is :func:`generate_identicon`, which turns a seed
string into an immutable :class:`Identicon`. Rendering lives in
:mod:`blockies.renderer`; random default seeds in :mod:`blockies.seed`.
"""

from .errors import IdenticonError, InvalidDimensionError, InvalidOverrideColorError
from .identicon import DEFAULT_SIZE, Identicon, generate_identicon
from .palette import HSLColor, Palette
from .stream import RandomStream
from .types import Cell

__all__ = [
    "Cell",
    "DEFAULT_SIZE",
    "HSLColor",
    "Identicon",
    "IdenticonError",
    "InvalidDimensionError",
    "InvalidOverrideColorError",
    "Palette",
    "RandomStream",
    "generate_identicon",
]
