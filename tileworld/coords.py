from __future__ import annotations

import math
from typing import NamedTuple


class ChunkCoord(NamedTuple):
    cx: int
    cy: int


def world_to_chunk(world: float, *, chunk_size: int, tile_size: int) -> int:
    """Chunk index containing world pixel coordinate `world`.

    Floored division, so -1 lands in chunk -1 rather than chunk 0.
    """

    span = int(chunk_size) * int(tile_size)
    if span <= 0:
        raise ValueError("chunk_size and tile_size must be > 0")
    return int(math.floor(world)) // span


def chunk_of(
    x: float, y: float, *, chunk_size: int, tile_width: int, tile_height: int
) -> ChunkCoord:
    return ChunkCoord(
        world_to_chunk(x, chunk_size=chunk_size, tile_size=tile_width),
        world_to_chunk(y, chunk_size=chunk_size, tile_size=tile_height),
    )


def chunk_tile_origin(coord: ChunkCoord, chunk_size: int) -> tuple[int, int]:
    n = int(chunk_size)
    return int(coord[0]) * n, int(coord[1]) * n


def chunk_tile_bounds(coord: ChunkCoord, chunk_size: int) -> tuple[int, int, int, int]:
    """Half-open tile rectangle (x0, y0, x1, y1) covered by a chunk."""
    x0, y0 = chunk_tile_origin(coord, chunk_size)
    return x0, y0, x0 + int(chunk_size), y0 + int(chunk_size)
