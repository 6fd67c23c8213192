DEFAULT_ROWS = 8
DEFAULT_COLS = 8

# Shortest run of equal values that counts as a match.
MIN_MATCH_LENGTH = 3

# Palette used by RandomSupplier when no explicit choices are given.
DEFAULT_TILE_TYPES = (
    'nature',
    'blood',
    'shapeshift',
    'spirit',
    'hex',
    'secrets',
    'witchfire',
)
