from __future__ import annotations

import random
from typing import Any, Protocol, Sequence


class TileGenerator(Protocol):
    """Source of fresh tile values; the engine calls next() once per new cell."""

    def next(self) -> Any:
        ...


class RandomTileGenerator:
    """Uniform random draw from a fixed palette."""

    def __init__(self, tile_types: Sequence[Any], rng: random.Random | None = None):
        if not tile_types:
            raise ValueError("RandomTileGenerator needs at least one tile type")
        self.tile_types = list(tile_types)
        self.rng = rng or random.Random()

    def next(self) -> Any:
        return self.rng.choice(self.tile_types)
