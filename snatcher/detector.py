"""OpenCV detection of letter tile locations in a camera frame."""

from __future__ import annotations

import cv2
import numpy as np

from snatcher.constants import (
    ASPECT_RATIO_LOWER,
    ASPECT_RATIO_UPPER,
    BLUR_KERNEL,
    TILE_THRESHOLD,
)
from snatcher.tile import RotatedRect


def preprocess_frame(frame: np.ndarray) -> np.ndarray:
    """Grayscale, blur and threshold a BGR frame so tiles become white blobs."""
    gray = frame if frame.ndim == 2 else cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
    blurred = cv2.GaussianBlur(gray, BLUR_KERNEL, 0)
    _, binary = cv2.threshold(blurred, TILE_THRESHOLD, 255, cv2.THRESH_BINARY)
    return binary


def detect_tiles(frame: np.ndarray, verbose: bool = False) -> list[RotatedRect]:
    """Find roughly square white tiles on a dark background.

    Returns OpenCV rotated rectangles ((cx, cy), (w, h), angle).
    """
    binary = preprocess_frame(frame)
    contours, _ = cv2.findContours(binary, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)

    tiles: list[RotatedRect] = []
    for contour in contours:
        rect = cv2.minAreaRect(contour)
        width, height = rect[1]
        if height == 0:
            continue
        aspect = width / height
        if aspect < ASPECT_RATIO_LOWER or aspect > ASPECT_RATIO_UPPER:
            continue
        tiles.append(rect)

    if verbose:
        print(f"Number of tiles detected: {len(tiles)}")
    return tiles
