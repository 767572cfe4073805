from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np

log = logging.getLogger(__name__)

# Largest raw reference whose id (ref - 1) still fits an int32 layer cell.
MAX_RAW_REF = 2**31


def _opt_int(v: Any) -> int | None:
    return None if v is None else int(v)


def _raw_refs(data: Sequence[int | None] | np.ndarray) -> np.ndarray:
    # Missing entries read as 0 (empty).
    if isinstance(data, np.ndarray):
        return np.asarray(data, dtype=np.int64).reshape(-1)
    return np.array([0 if v is None else int(v) for v in data], dtype=np.int64)


@dataclass(frozen=True, eq=False)
class LegacyLayer:
    """One row-major layer of 1-based raw tile references (0 = empty)."""

    data: np.ndarray
    width: int | None = None
    height: int | None = None
    name: str = ""

    def __post_init__(self) -> None:
        raw = _raw_refs(self.data)
        raw.flags.writeable = False
        object.__setattr__(self, "data", raw)
        object.__setattr__(self, "width", _opt_int(self.width))
        object.__setattr__(self, "height", _opt_int(self.height))

    @property
    def is_consistent(self) -> bool:
        if self.width is None or self.height is None:
            return False
        if self.out_of_range_count:
            return False
        return int(self.data.size) == self.width * self.height

    @property
    def out_of_range_count(self) -> int:
        return int(np.count_nonzero(self.data > MAX_RAW_REF))

    @classmethod
    def from_dict(cls, doc: Mapping[str, Any]) -> "LegacyLayer":
        data = doc.get("data")
        return cls(
            data=[] if data is None else data,
            width=doc.get("width"),
            height=doc.get("height"),
            name=str(doc.get("name") or ""),
        )


@dataclass(frozen=True, eq=False)
class LegacyLevel:
    """Bounded pre-authored tile map.

    Any of the four dimensions may be missing; a level missing one never
    overlaps a chunk.
    """

    width: int | None = None
    height: int | None = None
    tile_width: int | None = None
    tile_height: int | None = None
    layers: tuple[LegacyLayer, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for name in ("width", "height", "tile_width", "tile_height"):
            object.__setattr__(self, name, _opt_int(getattr(self, name)))
        object.__setattr__(self, "layers", tuple(self.layers))

        for i, layer in enumerate(self.layers):
            if not layer.is_consistent:
                log.warning(
                    "Legacy layer %d (%r) is inconsistent: width=%s height=%s "
                    "data length=%d out-of-range refs=%d; "
                    "unreadable cells will be empty",
                    i,
                    layer.name,
                    layer.width,
                    layer.height,
                    int(layer.data.size),
                    layer.out_of_range_count,
                )

    @property
    def has_bounds(self) -> bool:
        return None not in (self.width, self.height, self.tile_width, self.tile_height)

    @classmethod
    def from_dict(cls, doc: Mapping[str, Any]) -> "LegacyLevel":
        """Build a level from an already-decoded Tiled map document."""

        layers = tuple(
            LegacyLayer.from_dict(layer)
            for layer in doc.get("layers") or []
            if layer.get("type", "tilelayer") == "tilelayer"
        )
        return cls(
            width=doc.get("width"),
            height=doc.get("height"),
            tile_width=doc.get("tilewidth"),
            tile_height=doc.get("tileheight"),
            layers=layers,
        )


EMPTY_LEVEL = LegacyLevel()
