"""Snatch game constants: recognition thresholds and adjacency tuning."""

# A snatch combines at least two words, so no target is shorter than this
MIN_SNATCH_LENGTH = 3

# Two tiles touch when their combined bounding box is smaller than this
# multiple of their average area. Touching tiles come in close to 2x.
ADJACENCY_AREA_FACTOR = 3.0

# Tile detection (white tiles on a dark background)
BLUR_KERNEL = (5, 5)
TILE_THRESHOLD = 200
ASPECT_RATIO_LOWER = 0.8
ASPECT_RATIO_UPPER = 1.2

# Tile recognition
OCR_CONFIDENCE_THRESHOLD = 50  # 0-100, strictly greater is accepted
OCR_THRESHOLD = 150
OCR_DPI = 300
TILE_LENGTH_INCHES = 0.708661
OCR_WHITELIST = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
CLAUDE_MODEL = "claude-sonnet-4-20250514"

# Default word lists, relative to the data/ directory
SNATCH_WORDS_FILE = "collins_scrabble_words_2019.txt"
BOARD_WORDS_FILE = "words_popular.txt"

# BGR colours for annotated frames
COLOUR_GREEN = (0, 255, 0)
COLOUR_RED = (0, 0, 255)
