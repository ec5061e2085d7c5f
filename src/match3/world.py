import random
from typing import Iterable

from esper import World

from match3.constants import DEFAULT_TILE_TYPES
from match3.components.cascade_state import CascadeState
from match3.components.tile_type_registry import TileTypeRegistry
from match3.components.tile_types import TileTypes


def create_world(
    *,
    rng: random.Random | None = None,
    tile_types: Iterable[str] = DEFAULT_TILE_TYPES,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Shared resolution state, one per world.
    world.create_entity(CascadeState())

    # Create single registry entity with the tile palette
    world.create_entity(
        TileTypeRegistry(),
        TileTypes(types=list(tile_types)),
    )
    return world


def get_tile_registry(world: World) -> TileTypes:
    for entity, _ in world.get_component(TileTypeRegistry):
        return world.component_for_entity(entity, TileTypes)
    raise RuntimeError("TileTypes definitions not found")
