from __future__ import annotations

import pytest

from tileworld.config import StreamingConfig
from tileworld.coords import ChunkCoord
from tileworld.errors import TileMapConfigError
from tileworld.level import EMPTY_LEVEL, LegacyLevel
from tileworld.samples import sample_level, sample_tile_map
from tileworld.streaming import ChunkStreamer, desired_window, plan_window

# chunk span = 8 tiles * 16 px = 128 px
CFG = StreamingConfig(chunk_size=8, tile_size=16, render_distance=3)
SPAN = 128


def _streamer(level=EMPTY_LEVEL, cfg: StreamingConfig = CFG) -> ChunkStreamer:
    return ChunkStreamer(sample_tile_map(size=16), level, cfg)


def test_desired_window_is_closed_square() -> None:
    w = desired_window(ChunkCoord(-1, 2), 2)
    assert len(w) == 25
    assert ChunkCoord(-3, 0) in w
    assert ChunkCoord(1, 4) in w
    assert ChunkCoord(2, 2) not in w
    assert desired_window(ChunkCoord(0, 0), 0) == frozenset({ChunkCoord(0, 0)})
    with pytest.raises(ValueError):
        desired_window(ChunkCoord(0, 0), -1)


def test_plan_window_is_set_difference() -> None:
    loaded = {ChunkCoord(0, 0), ChunkCoord(1, 0)}
    desired = {ChunkCoord(1, 0), ChunkCoord(2, 0)}
    plan = plan_window(loaded, desired)
    assert plan.to_add == {ChunkCoord(2, 0)}
    assert plan.to_remove == {ChunkCoord(0, 0)}
    assert plan_window(desired, desired).is_empty


@pytest.mark.parametrize(
    "x,y",
    [(0, 0), (-1, -1), (SPAN * 5 + 3, -SPAN * 2), (-10_000, 7_777), (127, 128)],
)
def test_window_invariant_after_update(x: int, y: int) -> None:
    s = _streamer()
    s.update(0, 0)
    s.update(x, y)
    center = ChunkCoord(x // SPAN, y // SPAN)
    assert s.center == center
    assert s.loaded_coords() == desired_window(center, 3)
    assert s.loaded_chunk_count() == 49
    assert len(s.chunks()) == 49
    assert all(c.generated for c in s.chunks())


def test_steady_count_and_leading_edge() -> None:
    s = _streamer()
    first = s.update(10, 10)
    assert len(first.to_add) == 49 and not first.to_remove

    kept = s.get(ChunkCoord(0, 0))
    assert s.update(SPAN - 1, 10).is_empty

    plan = s.update(SPAN, 10)
    assert plan.to_add == {ChunkCoord(4, y) for y in range(-3, 4)}
    assert plan.to_remove == {ChunkCoord(-3, y) for y in range(-3, 4)}
    assert s.loaded_chunk_count() == 49
    assert s.get(ChunkCoord(0, 0)) is kept
    assert ChunkCoord(-3, 0) not in s
    assert (4, 0) in s


def test_diagonal_move_replaces_l_shape() -> None:
    s = _streamer()
    s.update(0, 0)
    plan = s.update(SPAN, SPAN)
    assert len(plan.to_add) == len(plan.to_remove) == 13
    assert s.loaded_chunk_count() == 49


def test_teleport_replaces_whole_window() -> None:
    s = _streamer()
    s.update(0, 0)
    plan = s.update(SPAN * 100, 0)
    assert len(plan.to_add) == 49 and len(plan.to_remove) == 49


def test_revisited_chunk_is_regenerated_identically() -> None:
    s = _streamer()
    s.update(0, 0)
    before = [layer.copy() for layer in s.get(ChunkCoord(2, -1)).layers]
    s.update(SPAN * 50, SPAN * 50)
    assert s.get(ChunkCoord(2, -1)) is None
    s.update(0, 0)
    after = s.get(ChunkCoord(2, -1)).layers
    assert all((a == b).all() for a, b in zip(before, after))


def test_observer_chunk_scales_axes_by_tile_width_and_height() -> None:
    level = LegacyLevel(width=4, height=4, tile_width=16, tile_height=32)
    s = _streamer(level)
    # chunk span: 8 * 16 = 128 px across, 8 * 32 = 256 px down
    assert s.observer_chunk(200, 200) == ChunkCoord(1, 0)
    assert s.observer_chunk(-1, 256) == ChunkCoord(-1, 1)


def test_level_tile_size_drives_coordinate_mapping() -> None:
    level = sample_level(width=16, height=16, tile_size=32)
    s = _streamer(level)
    assert (s.tile_width, s.tile_height) == (32, 32)
    s.update(8 * 32, 0)
    assert s.center == ChunkCoord(1, 0)
    assert s.get(ChunkCoord(0, 0)).source == "legacy"
    assert s.get(ChunkCoord(1, 1)).source == "legacy"
    assert s.get(ChunkCoord(2, 0)).source == "procedural"
    assert s.get(ChunkCoord(-1, 0)).source == "procedural"


def test_render_distance_zero_keeps_single_chunk() -> None:
    s = ChunkStreamer.create(
        sample_tile_map(), chunk_size=4, tile_size=8, render_distance=0
    )
    s.update(-1, -1)
    assert s.loaded_coords() == {ChunkCoord(-1, -1)}


def test_empty_tile_map_propagates_from_update() -> None:
    s = ChunkStreamer({}, EMPTY_LEVEL, CFG)
    with pytest.raises(TileMapConfigError):
        s.update(0, 0)


def test_clear() -> None:
    s = _streamer()
    s.update(0, 0)
    s.clear()
    assert len(s) == 0
    assert s.center is None
    assert s.update(0, 0).to_add == desired_window(ChunkCoord(0, 0), 3)
