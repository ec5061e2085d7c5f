from dataclasses import dataclass
from typing import Any, Tuple

from match3.components.position import Position


@dataclass(frozen=True, slots=True)
class Match:
    """A run of equal tiles along one row or one column, in scan order."""

    matched: Any
    positions: Tuple[Position, ...]

    @property
    def size(self) -> int:
        return len(self.positions)

    @property
    def horizontal(self) -> bool:
        return len({pos.row for pos in self.positions}) == 1
