from __future__ import annotations

import io

import numpy as np
from PIL import Image

from tileworld.samples import sample_tile_map
from tileworld.streaming import ChunkStreamer
from tileworld.tilemap import EMPTY
from viz.export import (
    TILE_PALETTE,
    array_to_npy_bytes,
    tile_grid,
    tile_grid_to_png_bytes,
    tile_grid_to_rgb,
)


def _streamer() -> ChunkStreamer:
    s = ChunkStreamer.create(
        sample_tile_map(), chunk_size=4, tile_size=8, render_distance=1
    )
    s.update(-1, 40)
    return s


def test_tile_grid_covers_window() -> None:
    s = _streamer()
    grid, left, top = tile_grid(s.chunks(), layer=0)
    assert grid.shape == (12, 12)
    assert (left, top) == (-8, 0)
    chunk = s.get((0, 1))
    assert np.array_equal(grid[4:8, 8:12], chunk.layers[0])


def test_tile_grid_empty_input() -> None:
    grid, left, top = tile_grid([], layer=0)
    assert grid.shape == (0, 0)
    assert (left, top) == (0, 0)


def test_tile_grid_to_rgb_colours_and_overlay() -> None:
    base = np.array([[0, EMPTY], [4, 6]], dtype=np.int32)
    over = np.array([[EMPTY, EMPTY], [EMPTY, 8]], dtype=np.int32)
    rgb = tile_grid_to_rgb(base)
    assert rgb.shape == (2, 2, 3)
    assert np.array_equal(rgb[0, 0], TILE_PALETTE[0])
    assert np.array_equal(rgb[0, 1], [0, 0, 0])
    rgb2 = tile_grid_to_rgb(over, base=rgb)
    assert np.array_equal(rgb2[1, 1], TILE_PALETTE[8])
    assert np.array_equal(rgb2[1, 0], TILE_PALETTE[4])


def test_tile_grid_to_png_bytes() -> None:
    grid, _, _ = tile_grid(_streamer().chunks(), layer=0)
    data = tile_grid_to_png_bytes(grid)
    assert data[:8] == b"\x89PNG\r\n\x1a\n"
    img = Image.open(io.BytesIO(data))
    assert img.size == (12, 12)
    assert img.mode == "RGB"


def test_array_to_npy_bytes_roundtrip() -> None:
    z = np.arange(6, dtype=np.int32).reshape(2, 3)
    out = np.load(io.BytesIO(array_to_npy_bytes(z)))
    assert np.array_equal(out, z)
