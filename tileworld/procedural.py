from __future__ import annotations

import numpy as np

from tileworld.coords import ChunkCoord, chunk_tile_origin
from tileworld.tilemap import EMPTY, TileMap, resolve_tile_id
from wavenoise.core import chunk_seed, make_rng, world_grid
from wavenoise.wave_2d import band_index, wave2

NOISE_FREQUENCY = 0.05
TERRAIN_THRESHOLDS = (-0.3, 0.0, 0.3)
TERRAIN_BANDS: tuple[tuple[int, ...], ...] = ((0, 1), (2, 3), (4, 5), (6, 7))
DECORATION_PROBABILITY = 0.1
DECORATION_IDS = (8, 9, 10)


def terrain_layer(xg: np.ndarray, yg: np.ndarray, tile_map: TileMap) -> np.ndarray:
    """Base terrain: banded wave noise resolved against the tile map."""

    z = wave2(xg * NOISE_FREQUENCY, yg * NOISE_FREQUENCY)
    band = band_index(z, TERRAIN_THRESHOLDS)
    ids = np.array(
        [resolve_tile_id(tile_map, b) for b in TERRAIN_BANDS], dtype=np.int32
    )
    return ids[band]


def decoration_layer(
    shape: tuple[int, int], rng: np.random.Generator, tile_map: TileMap
) -> np.ndarray:
    """Sparse decorations; one uniform draw per cell in row-major order."""

    place = rng.random(shape) < DECORATION_PROBABILITY
    tid = resolve_tile_id(tile_map, DECORATION_IDS)
    return np.where(place, np.int32(tid), np.int32(EMPTY)).astype(np.int32)


def generate_procedural(
    coord: ChunkCoord,
    chunk_size: int,
    tile_map: TileMap,
    *,
    rng: np.random.Generator | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Two layers (terrain, decorations) for a chunk outside the legacy level.

    rng defaults to a fresh generator seeded from the chunk coordinate, so the
    output depends only on (coord, chunk_size, tile_map).
    """

    if rng is None:
        rng = make_rng(chunk_seed(coord[0], coord[1]))

    n = int(chunk_size)
    ox, oy = chunk_tile_origin(coord, n)
    xg, yg = world_grid(origin_x=ox, origin_y=oy, width=n, height=n)
    base = terrain_layer(xg, yg, tile_map)
    deco = decoration_layer((n, n), rng, tile_map)
    return base, deco
