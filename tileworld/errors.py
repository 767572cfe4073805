from __future__ import annotations


class TileWorldError(Exception):
    """Base class for tileworld errors."""


class TileMapConfigError(TileWorldError, ValueError):
    """The tile-id map cannot serve generation (empty, duplicate ids)."""
