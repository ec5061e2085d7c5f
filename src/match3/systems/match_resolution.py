from __future__ import annotations

import logging
from typing import Callable, List, Optional, Set

from match3.constants import MAX_CASCADE_PASSES
from match3.components.board import Board
from match3.components.effect import Effect, MatchEffect, RefillEffect
from match3.components.position import Position
from match3.systems.board_ops import clear_tiles_with_gravity
from match3.systems.match import find_matches
from match3.utils.tile_generators import TileGenerator

logger = logging.getLogger(__name__)

EffectCallback = Callable[[Effect], None]


class CascadeLimitExceeded(RuntimeError):
    """The board kept producing matches past the allowed number of passes."""

    def __init__(self, passes: int, effects: List[Effect]):
        super().__init__(f"Cascade did not settle after {passes} passes")
        self.passes = passes
        self.effects = effects


def resolve(
    generator: TileGenerator,
    board: Board,
    *,
    max_passes: int = MAX_CASCADE_PASSES,
    on_effect: Optional[EffectCallback] = None,
) -> List[Effect]:
    """Clear matches, compact columns and refill until the board is stable.

    Every pass emits one MatchEffect per detected match followed by a single
    RefillEffect. on_effect, when given, sees each effect as it is produced.
    """
    effects: List[Effect] = []

    def _emit(effect: Effect) -> None:
        effects.append(effect)
        if on_effect is not None:
            on_effect(effect)

    passes = 0
    while True:
        matches = find_matches(board)
        if not matches:
            break
        if passes >= max_passes:
            logger.error("Cascade still matching after %d passes; aborting resolution", passes)
            raise CascadeLimitExceeded(passes, effects)
        passes += 1
        cleared: Set[Position] = set()
        for match in matches:
            _emit(MatchEffect(match=match))
            cleared.update(match.positions)
        moves, refilled = clear_tiles_with_gravity(generator, board, cleared)
        logger.debug(
            "Cascade pass %d: %d matches, %d tiles cleared, %d fell, %d refilled",
            passes, len(matches), len(cleared), len(moves), len(refilled),
        )
        _emit(RefillEffect())
    return effects
