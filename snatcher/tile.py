"""Recognized letter tile with its rotated bounding box on the board."""

from __future__ import annotations

from dataclasses import dataclass

import cv2
import numpy as np

RotatedRect = tuple[tuple[float, float], tuple[float, float], float]


@dataclass(frozen=True)
class LetterTile:
    """A recognized letter and the rotated rectangle it was found in.

    Equality and hashing compare every field exactly, so two detections of
    the same physical tile that differ by floating-point jitter are distinct
    tiles. Frames are processed independently, so this never matters across
    frames, but callers must not de-duplicate tiles from different sources.
    """

    letter: str
    center_x: float
    center_y: float
    width: float
    height: float
    angle: float = 0.0

    def __post_init__(self) -> None:
        if len(self.letter) != 1:
            raise ValueError(f"Tile letter must be a single character, got {self.letter!r}")
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Tile size must be non-negative, got {self.width}x{self.height}"
            )

    @classmethod
    def from_rect(cls, letter: str, rect: RotatedRect) -> LetterTile:
        """Build a tile from an OpenCV ((cx, cy), (w, h), angle) tuple."""
        (cx, cy), (w, h), angle = rect
        return cls(letter, float(cx), float(cy), float(w), float(h), float(angle))

    @property
    def center(self) -> tuple[float, float]:
        return (self.center_x, self.center_y)

    @property
    def rect(self) -> RotatedRect:
        return ((self.center_x, self.center_y), (self.width, self.height), self.angle)

    @property
    def area(self) -> float:
        return self.width * self.height

    def corners(self) -> np.ndarray:
        """The four vertices of the tile as a (4, 2) float32 array."""
        return cv2.boxPoints(self.rect)
