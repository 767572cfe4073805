from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from tileworld.errors import TileMapConfigError

TileMap = Mapping[int, "TileInfo"]

# Layer cell value for "no tile".
EMPTY = -1


@dataclass(frozen=True)
class TileInfo:
    id: int
    image: str | None = None
    image_width: int | None = None
    image_height: int | None = None
    texture: Any = None


def tile_map_from_tilesets(
    tilesets: Iterable[Mapping[str, Any]],
    *,
    load_texture: Callable[[str], Any] | None = None,
) -> dict[int, TileInfo]:
    """Build a tile map from already-decoded Tiled tileset documents.

    Insertion order follows tilesets, then tiles, as listed. load_texture is
    called once per tile image and its result stored as the opaque handle.
    """

    out: dict[int, TileInfo] = {}
    for ts in tilesets:
        for tile in ts.get("tiles") or []:
            if tile.get("id") is None:
                raise TileMapConfigError(
                    f"tile without id in tileset {ts.get('name')!r}"
                )
            tid = int(tile["id"])
            if tid in out:
                raise TileMapConfigError(f"duplicate tile id {tid}")
            image = tile.get("image")
            iw = tile.get("imagewidth")
            ih = tile.get("imageheight")
            texture = None
            if load_texture is not None and image is not None:
                texture = load_texture(str(image))
            out[tid] = TileInfo(
                id=tid,
                image=None if image is None else str(image),
                image_width=None if iw is None else int(iw),
                image_height=None if ih is None else int(ih),
                texture=texture,
            )
    return out


def resolve_tile_id(tile_map: TileMap, preferred: Sequence[int]) -> int:
    """First preferred id present in tile_map, else any available id.

    The fallback is the first key in the map's iteration order; callers must
    treat it as an arbitrary valid id.
    """

    if len(tile_map) == 0:
        raise TileMapConfigError("tile map is empty; cannot resolve tile ids")
    for tid in preferred:
        if int(tid) in tile_map:
            return int(tid)
    return int(next(iter(tile_map)))
