from dataclasses import dataclass, field
from typing import Any, List


@dataclass(slots=True)
class Board:
    """Rectangular tile grid stored flat in row-major order.

    tiles[row * width + col] holds the tile at (row, col). The list length is
    always width * height; systems mutate cells in place but never resize it.
    """
    width: int
    height: int
    tiles: List[Any] = field(default_factory=list)
