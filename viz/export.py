from __future__ import annotations

import io
from collections.abc import Iterable

import numpy as np
from PIL import Image

from tileworld.chunks import Chunk
from tileworld.tilemap import EMPTY

# Terrain bands (0-7) in pairs, then decorations (8-10).
TILE_PALETTE = np.array(
    [
        [28, 78, 140],
        [36, 96, 160],
        [214, 196, 140],
        [226, 210, 158],
        [84, 150, 72],
        [98, 168, 84],
        [112, 104, 96],
        [134, 126, 118],
        [38, 92, 40],
        [180, 64, 64],
        [236, 236, 244],
    ],
    dtype=np.uint8,
)


def tile_grid(
    chunks: Iterable[Chunk], *, layer: int = 0
) -> tuple[np.ndarray, int, int]:
    """Compose one layer of a set of chunks into a single id grid.

    Returns (grid, left, top) where (left, top) is the world tile coordinate of
    grid[0, 0]. Cells not covered by any chunk (or empty) are EMPTY.
    """

    cs = [c for c in chunks if c.generated]
    if not cs:
        return np.full((0, 0), EMPTY, dtype=np.int32), 0, 0

    n = int(cs[0].chunk_size)
    xs = [int(c.coord[0]) for c in cs]
    ys = [int(c.coord[1]) for c in cs]
    cx0, cy0 = min(xs), min(ys)
    w = (max(xs) - cx0 + 1) * n
    h = (max(ys) - cy0 + 1) * n

    grid = np.full((h, w), EMPTY, dtype=np.int32)
    for c in cs:
        if layer >= len(c.layers):
            continue
        gx = (int(c.coord[0]) - cx0) * n
        gy = (int(c.coord[1]) - cy0) * n
        grid[gy : gy + n, gx : gx + n] = c.layers[layer]
    return grid, cx0 * n, cy0 * n


def tile_grid_to_rgb(grid: np.ndarray, *, base: np.ndarray | None = None) -> np.ndarray:
    g = np.asarray(grid)
    if g.ndim != 2:
        raise ValueError("expected a 2D array")

    if base is None:
        rgb = np.zeros(g.shape + (3,), dtype=np.uint8)
    else:
        rgb = np.array(base, dtype=np.uint8)
        if rgb.shape != g.shape + (3,):
            raise ValueError("base must be HxWx3 matching grid")

    filled = g != EMPTY
    rgb[filled] = TILE_PALETTE[g[filled] % len(TILE_PALETTE)]
    return rgb


def tile_grid_to_png_bytes(
    grid: np.ndarray, *, overlay: np.ndarray | None = None
) -> bytes:
    """Colour a tile-id grid with TILE_PALETTE and encode it as RGB PNG.

    EMPTY cells are black; non-empty overlay cells are drawn on top.
    """

    rgb = tile_grid_to_rgb(grid)
    if overlay is not None:
        rgb = tile_grid_to_rgb(overlay, base=rgb)

    out = io.BytesIO()
    Image.fromarray(rgb).save(out, format="PNG")
    return out.getvalue()


def array_to_npy_bytes(z: np.ndarray) -> bytes:
    z = np.asarray(z)
    out = io.BytesIO()
    np.save(out, z)
    return out.getvalue()
