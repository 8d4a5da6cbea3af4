"""Internal constants shared across the library."""

# The padding count must fit in a single byte.
MIN_BLOCK_SIZE = 1
MAX_BLOCK_SIZE = 255
