"""CLI entry point: read the board and list snatchable words."""

from __future__ import annotations

import argparse
import sys
from functools import partial

import numpy as np

from snatcher.constants import ADJACENCY_AREA_FACTOR
from snatcher.dictionary import Dictionary, load_default_dictionary, load_default_index
from snatcher.display import annotate_frame, print_frame_result
from snatcher.graph import bounding_box_adjacency
from snatcher.pipeline import FrameProcessor
from snatcher.snatch import SnatchDetector


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Snatcher: read the words on a Snatch board and find snatches",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--image", "-i",
        type=str,
        help="Read the board from an image file instead of the camera",
    )
    source.add_argument(
        "--words", "-w",
        nargs="+",
        help="Skip recognition; board words given directly, e.g. PET RAM E",
    )
    parser.add_argument(
        "--dictionary", "-d",
        type=str,
        help="Snatch word list (default: data/collins_scrabble_words_2019.txt)",
    )
    parser.add_argument(
        "--board-dictionary",
        type=str,
        help="Word list for checking board words (default: data/words_popular.txt)",
    )
    parser.add_argument(
        "--ocr",
        choices=["tesseract", "claude"],
        default="tesseract",
        help="Tile recognition backend (default: tesseract)",
    )
    parser.add_argument(
        "--factor",
        type=float,
        default=ADJACENCY_AREA_FACTOR,
        help=f"Tile adjacency area factor (default: {ADJACENCY_AREA_FACTOR})",
    )
    parser.add_argument(
        "--unique",
        action="store_true",
        help="List each snatchable word once",
    )
    parser.add_argument(
        "--camera",
        type=int,
        default=0,
        help="Camera index (default: 0)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print recognition details",
    )
    return parser.parse_args(argv)


def load_board_dictionary(path: str | None) -> Dictionary | None:
    """Board word list is optional: without it no words are flagged."""
    try:
        return load_default_dictionary(path)
    except FileNotFoundError as e:
        if path is not None:
            raise
        print(f"Board word check disabled: {e}")
        return None


def build_processor(args: argparse.Namespace, with_recognizer: bool) -> FrameProcessor:
    print("Loading dictionary...")
    index = load_default_index(args.dictionary)
    print(f"Loaded {index.word_count} snatch words ({len(index)} anagram groups).")
    dictionary = load_board_dictionary(args.board_dictionary)

    recognizer = None
    if with_recognizer:
        from snatcher.ocr import make_recognizer
        recognizer = make_recognizer(args.ocr)

    return FrameProcessor(
        SnatchDetector(index),
        recognizer=recognizer,
        dictionary=dictionary,
        is_adjacent=partial(bounding_box_adjacency, factor=args.factor),
        unique=args.unique,
        verbose=args.verbose,
    )


def process_frame(processor: FrameProcessor, frame: np.ndarray) -> np.ndarray:
    result = processor.process(frame)
    print_frame_result(result)
    print("Frame processed.")
    return annotate_frame(frame, result.rects, result.tiles)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    try:
        processor = build_processor(args, with_recognizer=args.words is None)
    except (OSError, RuntimeError) as e:
        print(f"Initialization failed: {e}")
        sys.exit(1)

    if args.words is not None:
        print_frame_result(processor.process_words(args.words))
        return

    if args.image:
        import cv2

        frame = cv2.imread(args.image)
        if frame is None:
            print(f"Could not read image: {args.image}")
            sys.exit(1)
        process_frame(processor, frame)
        return

    from snatcher.camera import run_camera_loop

    try:
        run_camera_loop(partial(process_frame, processor), camera_index=args.camera)
    except RuntimeError as e:
        print(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
