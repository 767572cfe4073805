from __future__ import annotations

import numpy as np

from tileworld.level import LegacyLayer, LegacyLevel
from tileworld.tilemap import TileInfo


def sample_tile_map(
    ids: range | list[int] = range(11), *, size: int = 32
) -> dict[int, TileInfo]:
    """Tile map with square images and no textures, for the viewer and benchmarks."""
    return {
        int(i): TileInfo(
            id=int(i), image=f"tile_{int(i)}.png", image_width=size, image_height=size
        )
        for i in ids
    }


def sample_level(
    *, width: int = 40, height: int = 30, tile_size: int = 32
) -> LegacyLevel:
    """Small two-layer island level: grass ringed by sand and water, a few rocks.

    Raw references are 1-based as in an authored map.
    """

    W = int(width)
    H = int(height)
    yy, xx = np.mgrid[0:H, 0:W]
    dx = np.abs(xx - (W - 1) / 2.0) / (W / 2.0)
    dy = np.abs(yy - (H - 1) / 2.0) / (H / 2.0)
    d = np.maximum(dx, dy)

    ground = np.full((H, W), 5, dtype=np.int64)  # grass (id 4)
    ground[d > 0.7] = 3  # sand (id 2)
    ground[d > 0.85] = 1  # water (id 0)

    deco = np.zeros((H, W), dtype=np.int64)
    deco[(xx % 7 == 3) & (yy % 5 == 2) & (d <= 0.6)] = 10  # rock (id 9)

    return LegacyLevel(
        width=W,
        height=H,
        tile_width=int(tile_size),
        tile_height=int(tile_size),
        layers=(
            LegacyLayer(data=ground.reshape(-1), width=W, height=H, name="ground"),
            LegacyLayer(data=deco.reshape(-1), width=W, height=H, name="decor"),
        ),
    )
