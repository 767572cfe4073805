from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import NamedTuple

import numpy as np

from tileworld.chunks import Chunk
from tileworld.level import EMPTY_LEVEL, LegacyLevel
from tileworld.tilemap import EMPTY, TileInfo, TileMap


class TilePlacement(NamedTuple):
    tile_id: int
    world_x: int
    world_y: int
    layer: int


class Rect(NamedTuple):
    x: int
    y: int
    w: int
    h: int


def iter_placements(chunks: Iterable[Chunk]) -> Iterator[TilePlacement]:
    """Every non-empty cell of every chunk, layer by layer, in world tile units."""

    for chunk in chunks:
        ox, oy = chunk.tile_origin
        for li, layer in enumerate(chunk.layers):
            ys, xs = np.nonzero(np.asarray(layer) != EMPTY)
            ids = np.asarray(layer)[ys, xs]
            for tid, y, x in zip(ids.tolist(), ys.tolist(), xs.tolist()):
                yield TilePlacement(int(tid), ox + int(x), oy + int(y), li)


def tile_pixel_size(
    tile: TileInfo, *, level: LegacyLevel = EMPTY_LEVEL, tile_size: int = 32
) -> tuple[int, int]:
    """Image size if known, else the level's tile size, else tile_size."""

    w = tile.image_width
    if w is None:
        w = level.tile_width if level.tile_width is not None else tile_size
    h = tile.image_height
    if h is None:
        h = level.tile_height if level.tile_height is not None else tile_size
    return int(w), int(h)


def placement_rects(
    placements: Iterable[TilePlacement],
    tile_map: TileMap,
    *,
    level: LegacyLevel = EMPTY_LEVEL,
    tile_size: int = 32,
) -> Iterator[tuple[TileInfo, Rect, Rect]]:
    """Resolve placements to (tile, source rect, destination rect) in pixels.

    Placements whose id is missing from tile_map are skipped.
    """

    for p in placements:
        tile = tile_map.get(p.tile_id)
        if tile is None:
            continue
        w, h = tile_pixel_size(tile, level=level, tile_size=tile_size)
        yield tile, Rect(0, 0, w, h), Rect(p.world_x * w, p.world_y * h, w, h)
