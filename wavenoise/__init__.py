from .core import chunk_seed, make_rng, world_grid, wrap_int32
from .wave_2d import band_index, wave2

__all__ = ["band_index", "chunk_seed", "make_rng", "wave2", "world_grid", "wrap_int32"]
