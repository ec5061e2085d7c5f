from dataclasses import dataclass


@dataclass(slots=True)
class CascadeState:
    """Tracks whether the board is in the middle of resolving a move."""

    active: bool = False
    depth: int = 0
    # Set after a refill; the next match starts a new cascade step.
    awaiting_step: bool = False
    moves_resolved: int = 0
