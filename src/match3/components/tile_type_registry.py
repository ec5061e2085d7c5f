from dataclasses import dataclass

@dataclass(slots=True)
class TileTypeRegistry:
    """Tag component for the singleton entity holding TileTypes."""
    pass
