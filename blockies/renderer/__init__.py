"""Rendering subpackage.

Turns an immutable :class:`blockies.identicon.Identicon` into a Pillow image:
the canvas is filled with the background color and every non-zero cell is
painted as a ``scale`` x ``scale`` block in the foreground or spot color.

See :mod:`blockies.renderer.canvas` for the painter itself.
"""

from .canvas import DEFAULT_SCALE, CanvasRenderer, render, to_rgba

__all__ = ["DEFAULT_SCALE", "CanvasRenderer", "render", "to_rgba"]
