from dataclasses import dataclass, field
from typing import Iterable, List

@dataclass(slots=True)
class TileTypes:
    """Tile palette stored on a single entity.

    Lives alongside TileTypeRegistry (tag). Only spawnable types are handed to
    the default random generator; the full list stays available for lookups.
    """
    types: List[str]
    spawnable: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.types = list(dict.fromkeys(self.types))
        if self.spawnable:
            self.set_spawnable(self.spawnable)
        else:
            self.spawnable = list(self.types)

    def all_types(self) -> List[str]:
        return list(self.types)

    def spawnable_types(self) -> List[str]:
        return list(self.spawnable)

    def set_spawnable(self, type_names: Iterable[str]) -> None:
        # Preserve order while filtering unknown and duplicate names.
        seen: set[str] = set()
        filtered: List[str] = []
        for name in type_names:
            if name in self.types and name not in seen:
                filtered.append(name)
                seen.add(name)
        self.spawnable = filtered or list(self.types)
