GRID_ROWS = 8
GRID_COLS = 8

# Shortest run of equal tiles that counts as a match.
MIN_MATCH_LENGTH = 3

# Upper bound on remove/compact/refill passes for a single resolution.
# Exceeding it means the tile generator keeps completing new runs forever.
MAX_CASCADE_PASSES = 100

# Palette used by the default random tile generator.
DEFAULT_TILE_TYPES = ('red', 'green', 'blue', 'yellow', 'magenta', 'cyan', 'orange')
