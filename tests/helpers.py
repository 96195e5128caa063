"""Builders for tiles and synthetic board images."""

from __future__ import annotations

import cv2
import numpy as np

from snatcher.tile import LetterTile


def tile(letter: str, cx: float, cy: float, size: float = 10.0, angle: float = 0.0) -> LetterTile:
    return LetterTile(letter, cx, cy, size, size, angle)


def row_of_tiles(word: str, x: float = 5.0, y: float = 5.0, size: float = 10.0) -> list[LetterTile]:
    """Tiles laid edge to edge left-to-right."""
    return [tile(ch, x + i * size, y, size) for i, ch in enumerate(word)]


def column_of_tiles(word: str, x: float = 5.0, y: float = 5.0, size: float = 10.0) -> list[LetterTile]:
    """Tiles laid edge to edge top-to-bottom."""
    return [tile(ch, x, y + i * size, size) for i, ch in enumerate(word)]


def board_image(squares: list[tuple[int, int, int, int]],
                shape: tuple[int, int] = (300, 400)) -> np.ndarray:
    """Black BGR frame with white filled rectangles (x, y, w, h)."""
    frame = np.zeros((*shape, 3), dtype=np.uint8)
    for x, y, w, h in squares:
        cv2.rectangle(frame, (x, y), (x + w - 1, y + h - 1), (255, 255, 255), thickness=-1)
    return frame
