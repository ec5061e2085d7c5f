import sys, os

# Ensure src (package code) and the repo root (tests.helpers) are importable
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
for path in (SRC, ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)

from tests.helpers import ScriptedTileGenerator, board_from_rows, board_rows

__all__ = [
    "ScriptedTileGenerator",
    "board_from_rows",
    "board_rows",
]
