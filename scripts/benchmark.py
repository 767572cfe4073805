from __future__ import annotations

import logging
import time

from tileworld.config import StreamingConfig
from tileworld.samples import sample_level, sample_tile_map
from tileworld.streaming import ChunkStreamer


def _timeit(label: str, fn) -> float:
    t0 = time.perf_counter()
    fn()
    t1 = time.perf_counter()
    ms = (t1 - t0) * 1000.0
    print(f"{label}: {ms:.2f} ms")
    return ms


def main() -> None:
    """Quick CPU benchmark of per-frame streaming cost.

    A cold fill generates the whole window inline; crossing one chunk boundary
    generates a single edge row. Both run on the caller's frame.
    """

    logging.basicConfig(level=logging.WARNING)

    cfg = StreamingConfig(chunk_size=32, tile_size=32, render_distance=3)
    span = cfg.chunk_size * cfg.tile_size
    tile_map = sample_tile_map(size=cfg.tile_size)
    level = sample_level(width=96, height=64, tile_size=cfg.tile_size)

    streamer = ChunkStreamer(tile_map, level, cfg)
    _timeit(
        f"Cold fill at origin ({cfg.window_chunk_count} chunks, legacy + procedural)",
        lambda: streamer.update(0, 0),
    )
    _timeit(
        "Steady update (no boundary crossed)", lambda: streamer.update(span // 2, 0)
    )
    _timeit("Cross one chunk boundary east", lambda: streamer.update(span + 1, 0))

    far = ChunkStreamer(tile_map, level, cfg)
    _timeit(
        f"Cold fill far away ({cfg.window_chunk_count} procedural chunks)",
        lambda: far.update(1000 * span, -1000 * span),
    )

    def walk() -> None:
        for i in range(64):
            far.update(1000 * span + i * span, -1000 * span)

    _timeit("Walk 64 chunks east", walk)


if __name__ == "__main__":
    main()
