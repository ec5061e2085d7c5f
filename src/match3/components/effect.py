from dataclasses import dataclass
from typing import ClassVar, Union

from match3.components.match import Match


@dataclass(frozen=True, slots=True)
class MatchEffect:
    """A match was found and its tiles are about to be cleared."""

    kind: ClassVar[str] = "match"
    match: Match


@dataclass(frozen=True, slots=True)
class RefillEffect:
    """One cascade pass finished compacting columns and refilling the gaps."""

    kind: ClassVar[str] = "refill"


Effect = Union[MatchEffect, RefillEffect]
