from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple

from esper import World

from match3.constants import GRID_COLS, GRID_ROWS, MAX_CASCADE_PASSES
from match3.components.board import Board
from match3.components.effect import Effect, MatchEffect, RefillEffect
from match3.components.position import Position
from match3.events.bus import (
    EventBus,
    EVENT_TILE_SWAP_REQUEST,
    EVENT_TILE_SWAP_VALID,
    EVENT_TILE_SWAP_INVALID,
    EVENT_MATCH_FOUND,
    EVENT_REFILL_COMPLETED,
    EVENT_CASCADE_STEP,
    EVENT_CASCADE_COMPLETE,
    EVENT_BOARD_EFFECT,
)
from match3.systems.board_ops import create_board, piece, positions, swap_tiles
from match3.systems.match import can_move, find_valid_swaps
from match3.systems.match_resolution import EffectCallback, resolve
from match3.utils.cascade_state import get_or_create_cascade_state
from match3.utils.tile_generators import RandomTileGenerator, TileGenerator
from match3.world import get_tile_registry

logger = logging.getLogger(__name__)

EffectListener = Callable[[Effect], None]


class MoveResult(NamedTuple):
    board: Board
    effects: List[Effect]


def move(
    generator: TileGenerator,
    board: Board,
    first: Tuple[int, int],
    second: Tuple[int, int],
    *,
    max_passes: int = MAX_CASCADE_PASSES,
    on_effect: Optional[EffectCallback] = None,
) -> MoveResult:
    """Swap two tiles and resolve the resulting cascade in place.

    An illegal swap leaves the board untouched and yields no effects.
    """
    if not can_move(board, first, second):
        return MoveResult(board, [])
    swap_tiles(board, first, second)
    effects = resolve(generator, board, max_passes=max_passes, on_effect=on_effect)
    return MoveResult(board, effects)


class BoardSystem:
    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        width: int = GRID_COLS,
        height: int = GRID_ROWS,
        *,
        generator: TileGenerator | None = None,
        max_cascade_passes: int = MAX_CASCADE_PASSES,
    ):
        self.world = world
        self.event_bus = event_bus
        if generator is None:
            generator = RandomTileGenerator(
                get_tile_registry(world).spawnable_types(),
                rng=getattr(world, "random", None),
            )
        self.generator = generator
        self.max_cascade_passes = max_cascade_passes
        self._listeners: Dict[EffectListener, Callable[..., None]] = {}
        # Create a single board entity with Board component
        self.board_entity = self.world.create_entity(create_board(generator, width, height))
        self.event_bus.subscribe(EVENT_TILE_SWAP_REQUEST, self.on_swap_request)

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def piece(self, position: Tuple[int, int]) -> Any | None:
        return piece(self.board, position)

    def positions(self) -> List[Position]:
        return positions(self.board)

    def can_move(self, first: Tuple[int, int], second: Tuple[int, int]) -> bool:
        return can_move(self.board, first, second)

    def valid_swaps(self) -> List[Tuple[Position, Position]]:
        return find_valid_swaps(self.board)

    def add_listener(self, listener: EffectListener) -> None:
        if listener in self._listeners:
            return

        def receiver(sender, **payload):
            listener(payload["effect"])

        self._listeners[listener] = receiver
        self.event_bus.subscribe(EVENT_BOARD_EFFECT, receiver)

    def remove_listener(self, listener: EffectListener) -> None:
        receiver = self._listeners.pop(listener, None)
        if receiver is not None:
            self.event_bus.unsubscribe(EVENT_BOARD_EFFECT, receiver)

    def on_swap_request(self, sender, **kwargs):
        src = kwargs.get('src')
        dst = kwargs.get('dst')
        if not src or not dst:
            return
        self.move(src, dst)

    def move(self, first: Tuple[int, int], second: Tuple[int, int]) -> List[Effect]:
        """Apply a swap and run its cascade, broadcasting effects as they happen.

        Returns the effect log; an empty list means the swap was rejected.
        """
        state = get_or_create_cascade_state(self.world)
        if state.active:
            logger.debug("Rejecting swap %s<->%s: cascade in progress", first, second)
            self.event_bus.emit(EVENT_TILE_SWAP_INVALID, src=first, dst=second, reason="busy")
            return []
        board = self.board
        if not can_move(board, first, second):
            logger.debug("Rejecting swap %s<->%s: no match", first, second)
            self.event_bus.emit(EVENT_TILE_SWAP_INVALID, src=first, dst=second, reason="no_match")
            return []
        self.event_bus.emit(EVENT_TILE_SWAP_VALID, src=first, dst=second)
        state.active = True
        state.depth = 0
        state.awaiting_step = False
        try:
            result = move(
                self.generator,
                board,
                first,
                second,
                max_passes=self.max_cascade_passes,
                on_effect=self._on_effect,
            )
        finally:
            state.active = False
        state.moves_resolved += 1
        self.event_bus.emit(EVENT_CASCADE_COMPLETE, depth=state.depth, effects=list(result.effects))
        return result.effects

    def _on_effect(self, effect: Effect) -> None:
        state = get_or_create_cascade_state(self.world)
        if isinstance(effect, MatchEffect):
            if state.depth == 0 or state.awaiting_step:
                state.depth += 1
                state.awaiting_step = False
                self.event_bus.emit(EVENT_CASCADE_STEP, depth=state.depth)
            match = effect.match
            self.event_bus.emit(
                EVENT_MATCH_FOUND,
                match=match,
                positions=list(match.positions),
                size=match.size,
                horizontal=match.horizontal,
                depth=state.depth,
            )
        elif isinstance(effect, RefillEffect):
            state.awaiting_step = True
            self.event_bus.emit(EVENT_REFILL_COMPLETED, depth=state.depth)
        self.event_bus.emit(EVENT_BOARD_EFFECT, effect=effect)
