from __future__ import annotations

import logging
from dataclasses import dataclass

from tileworld.chunks import Chunk, TerrainGenerator
from tileworld.config import StreamingConfig
from tileworld.coords import ChunkCoord, chunk_of
from tileworld.level import EMPTY_LEVEL, LegacyLevel
from tileworld.tilemap import TileMap

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowPlan:
    to_add: frozenset[ChunkCoord]
    to_remove: frozenset[ChunkCoord]

    @property
    def is_empty(self) -> bool:
        return not self.to_add and not self.to_remove


def desired_window(center: ChunkCoord, radius: int) -> frozenset[ChunkCoord]:
    """Closed square of chunk coords within `radius` of center ((2r+1)^2 coords)."""

    r = int(radius)
    if r < 0:
        raise ValueError("radius must be >= 0")
    cx, cy = int(center[0]), int(center[1])
    return frozenset(
        ChunkCoord(x, y)
        for x in range(cx - r, cx + r + 1)
        for y in range(cy - r, cy + r + 1)
    )


def plan_window(
    loaded: set[ChunkCoord] | frozenset[ChunkCoord],
    desired: set[ChunkCoord] | frozenset[ChunkCoord],
) -> WindowPlan:
    return WindowPlan(
        to_add=frozenset(desired) - frozenset(loaded),
        to_remove=frozenset(loaded) - frozenset(desired),
    )


class ChunkStreamer:
    """Keeps the chunks around a single moving observer materialized.

    Chunks are owned by the streamer; references obtained from `chunks()` or
    `get()` are only valid until the next `update()`.
    """

    def __init__(
        self,
        tile_map: TileMap,
        level: LegacyLevel = EMPTY_LEVEL,
        config: StreamingConfig | None = None,
    ):
        self.config = config if config is not None else StreamingConfig()
        self.level = level
        self.generator = TerrainGenerator(tile_map, level)
        self._loaded: dict[ChunkCoord, Chunk] = {}
        self._center: ChunkCoord | None = None

    @classmethod
    def create(
        cls,
        tile_map: TileMap,
        level: LegacyLevel = EMPTY_LEVEL,
        *,
        chunk_size: int = 32,
        tile_size: int = 32,
        render_distance: int = 3,
    ) -> "ChunkStreamer":
        cfg = StreamingConfig(
            chunk_size=int(chunk_size),
            tile_size=int(tile_size),
            render_distance=int(render_distance),
        )
        return cls(tile_map, level, cfg)

    @property
    def chunk_size(self) -> int:
        return int(self.config.chunk_size)

    @property
    def render_distance(self) -> int:
        return int(self.config.render_distance)

    @property
    def tile_width(self) -> int:
        tw = self.level.tile_width
        return int(self.config.tile_size) if tw is None else int(tw)

    @property
    def tile_height(self) -> int:
        th = self.level.tile_height
        return int(self.config.tile_size) if th is None else int(th)

    @property
    def center(self) -> ChunkCoord | None:
        return self._center

    def observer_chunk(self, x: float, y: float) -> ChunkCoord:
        """Chunk under world pixel (x, y); x scales by tile_width, y by tile_height."""
        return chunk_of(
            x,
            y,
            chunk_size=self.chunk_size,
            tile_width=self.tile_width,
            tile_height=self.tile_height,
        )

    def update(self, x: float, y: float) -> WindowPlan:
        """Re-center the window on the observer at world pixel (x, y).

        Afterwards the loaded coords are exactly the window. Generation errors
        (e.g. an empty tile map) propagate; chunks inserted before the failure
        stay loaded.
        """

        center = self.observer_chunk(x, y)
        self._center = center
        plan = plan_window(
            set(self._loaded), desired_window(center, self.render_distance)
        )
        if plan.is_empty:
            return plan

        for coord in plan.to_remove:
            del self._loaded[coord]
        for coord in plan.to_add:
            self._loaded[coord] = self.generator.make_chunk(coord, self.chunk_size)

        log.debug(
            "Window at %s: +%d -%d, %d loaded",
            tuple(center),
            len(plan.to_add),
            len(plan.to_remove),
            len(self._loaded),
        )
        return plan

    def chunks(self) -> list[Chunk]:
        return list(self._loaded.values())

    def loaded_chunk_count(self) -> int:
        return len(self._loaded)

    def loaded_coords(self) -> frozenset[ChunkCoord]:
        return frozenset(self._loaded)

    def get(self, coord: ChunkCoord) -> Chunk | None:
        return self._loaded.get(ChunkCoord(*coord))

    def clear(self) -> None:
        self._loaded.clear()
        self._center = None

    def __len__(self) -> int:
        return len(self._loaded)

    def __contains__(self, coord: object) -> bool:
        return coord in self._loaded
