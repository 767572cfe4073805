from __future__ import annotations

import numpy as np

# Spatial-hash primes (Teschner et al. 2003).
HASH_PRIME_X = 73856093
HASH_PRIME_Y = 19349663


def wrap_int32(v: int) -> int:
    v = int(v) & 0xFFFFFFFF
    return v - 0x100000000 if v >= 0x80000000 else v


def chunk_seed(cx: int, cy: int) -> int:
    """Spatial-hash seed for chunk (cx, cy), as a signed 32-bit integer."""
    hx = wrap_int32(int(cx) * HASH_PRIME_X)
    hy = wrap_int32(int(cy) * HASH_PRIME_Y)
    return wrap_int32(hx ^ hy)


def make_rng(seed: int) -> np.random.Generator:
    # default_rng rejects negative seeds; use the unsigned bit pattern.
    return np.random.default_rng(int(seed) & 0xFFFFFFFF)


def world_grid(
    *, origin_x: int, origin_y: int, width: int, height: int
) -> tuple[np.ndarray, np.ndarray]:
    """Integer world tile coordinates for a (height, width) block, indexed [y, x]."""
    xs = np.arange(width, dtype=np.int64) + int(origin_x)
    ys = np.arange(height, dtype=np.int64) + int(origin_y)
    xg, yg = np.meshgrid(xs, ys)
    return xg, yg
