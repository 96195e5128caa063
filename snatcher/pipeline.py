"""Per-frame pipeline: tiles -> board words -> snatchable words."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np

from snatcher.detector import detect_tiles
from snatcher.dictionary import Dictionary
from snatcher.graph import AdjacencyFn, assemble_words, bounding_box_adjacency
from snatcher.ocr import TileRecognizer, recognize_tiles
from snatcher.snatch import SnatchDetector
from snatcher.tile import LetterTile, RotatedRect


@dataclass
class FrameResult:
    """Everything computed for one processed frame."""
    words: list[str]
    snatches: list[str]
    tiles: list[LetterTile] = field(default_factory=list)
    invalid_words: list[str] = field(default_factory=list)
    # every detected tile outline, including tiles the recognizer rejected
    rects: list[RotatedRect] = field(default_factory=list)


class FrameProcessor:
    """Runs detection, recognition, word assembly and snatch finding for a frame.

    Holds only configuration and the read-only word lists; every call
    builds its own graph and word list.
    """

    def __init__(
        self,
        snatch_detector: SnatchDetector,
        recognizer: TileRecognizer | None = None,
        dictionary: Dictionary | None = None,
        detector: Callable[[np.ndarray], list[RotatedRect]] = detect_tiles,
        is_adjacent: AdjacencyFn = bounding_box_adjacency,
        unique: bool = False,
        verbose: bool = False,
    ) -> None:
        self.snatch_detector = snatch_detector
        self.recognizer = recognizer
        self.dictionary = dictionary
        self.detector = detector
        self.is_adjacent = is_adjacent
        self.unique = unique
        self.verbose = verbose

    def process(self, frame: np.ndarray) -> FrameResult:
        if self.recognizer is None:
            raise RuntimeError("No tile recognizer configured for frame processing")

        rects = self.detector(frame)
        tiles = recognize_tiles(frame, rects, self.recognizer, verbose=self.verbose)
        if self.verbose:
            print(f"Recognized {len(tiles)}/{len(rects)} tiles")

        words = assemble_words(tiles, self.is_adjacent)
        result = self.process_words(words)
        result.tiles = tiles
        result.rects = list(rects)
        return result

    def process_tiles(self, tiles: list[LetterTile]) -> FrameResult:
        result = self.process_words(assemble_words(tiles, self.is_adjacent))
        result.tiles = list(tiles)
        result.rects = [t.rect for t in tiles]
        return result

    def process_words(self, words: list[str], unique: bool | None = None) -> FrameResult:
        """Find snatches for words already read off the board.

        ``unique`` overrides the processor setting for this call only.
        """
        if unique is None:
            unique = self.unique
        words = [w.upper() for w in words]
        invalid: list[str] = []
        if self.dictionary is not None:
            invalid = [w for w in words if not self.dictionary.is_valid_word(w)]

        snatches = self.snatch_detector.find_snatches(words, unique=unique)
        if self.verbose:
            print(f"Words: {' '.join(words) or '(none)'}")
        return FrameResult(words=words, snatches=snatches, invalid_words=invalid)
