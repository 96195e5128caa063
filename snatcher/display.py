"""Terminal rendering of results and on-frame annotation of tiles."""

from __future__ import annotations

from collections import Counter

import cv2
import numpy as np

from snatcher.constants import COLOUR_GREEN, COLOUR_RED
from snatcher.pipeline import FrameResult
from snatcher.tile import LetterTile, RotatedRect


def render_words(words: list[str], invalid: list[str] | None = None) -> str:
    """Render the board words, marking ones missing from the board dictionary."""
    if not words:
        return "No words on the board."
    invalid_set = set(invalid or ())
    lines = [f"Board words ({len(words)}):"]
    for word in words:
        marker = "  (not a word?)" if word in invalid_set else ""
        lines.append(f"  {word}{marker}")
    return "\n".join(lines)


def render_snatches(snatches: list[str]) -> str:
    """Render snatchable words, collapsing repeats into a count."""
    if not snatches:
        return "No snatches available."
    counts = Counter(snatches)
    lines = [f"Snatchable words ({len(counts)}):"]
    for word in sorted(counts, key=lambda w: (-len(w), w)):
        suffix = f"  x{counts[word]}" if counts[word] > 1 else ""
        lines.append(f"  {word:<15s}{suffix}")
    return "\n".join(lines)


def print_frame_result(result: FrameResult) -> None:
    print("\n" + render_words(result.words, result.invalid_words))
    print("\n" + render_snatches(result.snatches))


def annotate_frame(frame: np.ndarray, rects: list[RotatedRect],
                   tiles: list[LetterTile]) -> np.ndarray:
    """Copy of *frame* with tile outlines in green and recognized letters in red."""
    output = frame.copy()
    if output.ndim == 2:
        output = cv2.cvtColor(output, cv2.COLOR_GRAY2BGR)

    for rect in rects:
        box = cv2.boxPoints(rect).astype(np.int32)
        cv2.drawContours(output, [box], 0, COLOUR_GREEN, 2)

    for tile in tiles:
        position = (int(tile.center_x), int(tile.center_y))
        cv2.putText(output, tile.letter, position, cv2.FONT_HERSHEY_SIMPLEX,
                    0.5, COLOUR_RED, 1)
    return output
