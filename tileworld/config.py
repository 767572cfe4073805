from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StreamingConfig:
    """Streaming parameters, fixed for the lifetime of a streamer.

    chunk_size is tiles per chunk side, tile_size the fallback pixel size of a
    tile when the legacy level does not define one, render_distance the chunk
    radius kept around the observer.
    """

    chunk_size: int = 32
    tile_size: int = 32
    render_distance: int = 3

    def __post_init__(self) -> None:
        if int(self.chunk_size) < 1:
            raise ValueError("chunk_size must be >= 1")
        if int(self.tile_size) < 1:
            raise ValueError("tile_size must be >= 1")
        if int(self.render_distance) < 0:
            raise ValueError("render_distance must be >= 0")

    @property
    def window_side(self) -> int:
        return 2 * int(self.render_distance) + 1

    @property
    def window_chunk_count(self) -> int:
        return self.window_side * self.window_side
