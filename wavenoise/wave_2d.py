from __future__ import annotations

import numpy as np


def wave2(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    """Continuous pseudo-noise over world coordinates.

    f(x, y) = sin(1.5x) cos(1.2y) + 0.5 sin(2.1x + 1.8y) + 0.3 sin(0.8x + 2.3y)

    Output is roughly in [-1.8, 1.8].
    """

    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    return (
        np.sin(x * 1.5) * np.cos(y * 1.2)
        + np.sin(x * 2.1 + y * 1.8) * 0.5
        + np.sin(x * 0.8 + y * 2.3) * 0.3
    )


def band_index(z: np.ndarray, thresholds: tuple[float, ...]) -> np.ndarray:
    """Index of the band each value falls into.

    Band i holds values with thresholds[i-1] <= z < thresholds[i]; values below
    the first threshold are band 0, values at or above the last are the top band.
    """

    t = np.asarray(thresholds, dtype=np.float64)
    if t.ndim != 1 or t.size == 0:
        raise ValueError("thresholds must be a non-empty 1D sequence")
    if np.any(np.diff(t) <= 0.0):
        raise ValueError("thresholds must be strictly increasing")
    return np.digitize(np.asarray(z, dtype=np.float64), t, right=False).astype(np.int32)
