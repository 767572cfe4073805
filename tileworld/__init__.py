from __future__ import annotations

from tileworld.chunks import Chunk, TerrainGenerator
from tileworld.config import StreamingConfig
from tileworld.coords import (
    ChunkCoord,
    chunk_of,
    chunk_tile_bounds,
    chunk_tile_origin,
    world_to_chunk,
)
from tileworld.errors import TileMapConfigError, TileWorldError
from tileworld.legacy import overlaps_level, sample_legacy
from tileworld.level import EMPTY_LEVEL, LegacyLayer, LegacyLevel
from tileworld.procedural import generate_procedural
from tileworld.render import Rect, TilePlacement, iter_placements, placement_rects
from tileworld.streaming import ChunkStreamer, WindowPlan, desired_window, plan_window
from tileworld.tilemap import EMPTY, TileInfo, resolve_tile_id, tile_map_from_tilesets

__all__ = [
    "Chunk",
    "ChunkCoord",
    "ChunkStreamer",
    "EMPTY",
    "EMPTY_LEVEL",
    "LegacyLayer",
    "LegacyLevel",
    "Rect",
    "StreamingConfig",
    "TerrainGenerator",
    "TileInfo",
    "TileMapConfigError",
    "TilePlacement",
    "TileWorldError",
    "WindowPlan",
    "chunk_of",
    "chunk_tile_bounds",
    "chunk_tile_origin",
    "desired_window",
    "generate_procedural",
    "iter_placements",
    "overlaps_level",
    "placement_rects",
    "plan_window",
    "resolve_tile_id",
    "sample_legacy",
    "tile_map_from_tilesets",
    "world_to_chunk",
]
