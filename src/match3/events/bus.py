from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods and lambdas alive without the caller holding them.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# TILE & BOARD MECHANICS
# ============================================================================
EVENT_TILE_SWAP_REQUEST = "tile_swap_request"      # payload: src=(r,c), dst=(r,c)
EVENT_TILE_SWAP_VALID = "tile_swap_valid"          # payload: src=(r,c), dst=(r,c)
EVENT_TILE_SWAP_INVALID = "tile_swap_invalid"      # payload: src=(r,c), dst=(r,c), reason=str
EVENT_MATCH_FOUND = "match_found"                  # payload: match=Match, positions=[(r,c),...], size=int, horizontal=bool, depth=int
EVENT_REFILL_COMPLETED = "refill_completed"        # payload: depth=int
EVENT_CASCADE_STEP = "cascade_step"                # payload: depth=int
EVENT_CASCADE_COMPLETE = "cascade_complete"        # payload: depth=int, effects=list[Effect]
EVENT_BOARD_EFFECT = "board_effect"                # payload: effect=Effect
