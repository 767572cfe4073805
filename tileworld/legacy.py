from __future__ import annotations

import numpy as np

from tileworld.coords import ChunkCoord, chunk_tile_bounds, chunk_tile_origin
from tileworld.level import MAX_RAW_REF, LegacyLayer, LegacyLevel
from tileworld.tilemap import EMPTY
from wavenoise.core import world_grid


def overlaps_level(coord: ChunkCoord, chunk_size: int, level: LegacyLevel) -> bool:
    """True when the chunk's tile rectangle intersects the level bounds."""

    if not level.has_bounds:
        return False
    x0, y0, x1, y1 = chunk_tile_bounds(coord, chunk_size)
    return x0 < int(level.width) and x1 > 0 and y0 < int(level.height) and y1 > 0


def sample_layer(
    layer: LegacyLayer,
    *,
    level_width: int,
    level_height: int,
    xg: np.ndarray,
    yg: np.ndarray,
) -> np.ndarray:
    """Convert 1-based raw references under (xg, yg) to tile ids.

    Cells outside the level, past the end of the layer data, or holding a
    reference <= 0 or above MAX_RAW_REF are EMPTY.
    """

    W = int(level_width)
    H = int(level_height)
    inside = (xg >= 0) & (xg < W) & (yg >= 0) & (yg < H)
    lw = 0 if layer.width is None else int(layer.width)
    idx = yg * lw + xg
    ok = inside & (idx >= 0) & (idx < int(layer.data.size))

    raw = np.zeros(xg.shape, dtype=np.int64)
    raw[ok] = layer.data[idx[ok]]
    valid = (raw > 0) & (raw <= MAX_RAW_REF)
    return np.where(valid, raw - 1, EMPTY).astype(np.int32)


def sample_legacy(
    coord: ChunkCoord, chunk_size: int, level: LegacyLevel
) -> tuple[np.ndarray, ...]:
    """One (chunk_size, chunk_size) id layer per legacy layer.

    Only valid for chunks that overlap the level; cells beyond the level edge
    are left empty rather than generated.
    """

    if not level.has_bounds:
        raise ValueError("level has no bounds to sample")

    ox, oy = chunk_tile_origin(coord, chunk_size)
    xg, yg = world_grid(origin_x=ox, origin_y=oy, width=chunk_size, height=chunk_size)
    return tuple(
        sample_layer(
            layer,
            level_width=int(level.width),
            level_height=int(level.height),
            xg=xg,
            yg=yg,
        )
        for layer in level.layers
    )
