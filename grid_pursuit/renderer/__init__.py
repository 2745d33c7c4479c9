"""Rendering helpers.

Exports :class:`TileCanvas`, a tile painter that mirrors an area into a pixel
buffer, and :func:`render_area` for one-shot snapshots.
"""

from .canvas import DEFAULT_COLORS, TileCanvas, render_area

__all__ = ["DEFAULT_COLORS", "TileCanvas", "render_area"]
