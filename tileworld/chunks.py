from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from tileworld.coords import ChunkCoord, chunk_tile_origin
from tileworld.legacy import overlaps_level, sample_legacy
from tileworld.level import EMPTY_LEVEL, LegacyLevel
from tileworld.procedural import generate_procedural
from tileworld.tilemap import EMPTY, TileMap

log = logging.getLogger(__name__)


@dataclass(eq=False)
class Chunk:
    """Square block of tiles; layers are (chunk_size, chunk_size) arrays [y, x]."""

    coord: ChunkCoord
    chunk_size: int
    layers: tuple[np.ndarray, ...] = field(default_factory=tuple)
    generated: bool = False
    source: str = ""

    @property
    def tile_origin(self) -> tuple[int, int]:
        return chunk_tile_origin(self.coord, self.chunk_size)

    def tile_at(self, layer: int, x: int, y: int) -> int | None:
        v = int(self.layers[layer][int(y), int(x)])
        return None if v == EMPTY else v

    def fill(self, layers: tuple[np.ndarray, ...], *, source: str) -> None:
        if self.generated:
            return
        n = int(self.chunk_size)
        frozen = []
        for layer in layers:
            arr = np.array(layer, dtype=np.int32).reshape(n, n)
            arr.flags.writeable = False
            frozen.append(arr)
        self.layers = tuple(frozen)
        self.source = str(source)
        self.generated = True


class TerrainGenerator:
    """Fills chunks from the legacy level where they overlap it, else procedurally."""

    def __init__(self, tile_map: TileMap, level: LegacyLevel = EMPTY_LEVEL):
        self.tile_map = tile_map
        self.level = level

    def uses_legacy(self, coord: ChunkCoord, chunk_size: int) -> bool:
        return overlaps_level(coord, chunk_size, self.level)

    def generate(self, chunk: Chunk) -> Chunk:
        if chunk.generated:
            return chunk

        coord = ChunkCoord(*chunk.coord)
        n = int(chunk.chunk_size)
        if self.uses_legacy(coord, n):
            log.debug("Chunk %s: sampling legacy level", tuple(coord))
            chunk.fill(sample_legacy(coord, n, self.level), source="legacy")
        else:
            log.debug("Chunk %s: procedural", tuple(coord))
            layers = generate_procedural(coord, n, self.tile_map)
            chunk.fill(layers, source="procedural")
        return chunk

    def make_chunk(self, coord: ChunkCoord, chunk_size: int) -> Chunk:
        chunk = Chunk(coord=ChunkCoord(*coord), chunk_size=int(chunk_size))
        return self.generate(chunk)
