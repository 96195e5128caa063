"""Single-letter recognition on detected tiles (Tesseract or Claude Vision)."""

from __future__ import annotations

import base64
import re

import cv2
import numpy as np
import pytesseract

from snatcher.constants import (
    BLUR_KERNEL,
    CLAUDE_MODEL,
    OCR_CONFIDENCE_THRESHOLD,
    OCR_DPI,
    OCR_THRESHOLD,
    OCR_WHITELIST,
    TILE_LENGTH_INCHES,
)
from snatcher.tile import LetterTile, RotatedRect

TILE_PROMPT = (
    "This image shows a single letter tile from a word game. "
    "The tile may be rotated by any multiple of 90 degrees. "
    "Reply with ONLY the uppercase letter followed by your confidence "
    "from 0 to 100, for example: A 95\n"
    "If no letter is visible, reply: NONE 0"
)


def preprocess_tile(frame: np.ndarray, rect: RotatedRect) -> np.ndarray:
    """Straighten, crop and rescale one tile into a binary image for OCR."""
    center, (width, height), angle = rect
    if width <= 0 or height <= 0:
        raise ValueError(f"Cannot crop a tile of size {width}x{height}")

    rows, cols = frame.shape[:2]
    rotation = cv2.getRotationMatrix2D(center, angle, 1.0)
    rotated = cv2.warpAffine(frame, rotation, (cols, rows), flags=cv2.INTER_CUBIC)
    cropped = cv2.getRectSubPix(rotated, (int(round(width)), int(round(height))), center)

    # Scale so the physical tile is rendered at OCR_DPI
    tile_dpi = width / TILE_LENGTH_INCHES
    scale = OCR_DPI / tile_dpi
    resized = cv2.resize(cropped, None, fx=scale, fy=scale, interpolation=cv2.INTER_CUBIC)

    gray = resized if resized.ndim == 2 else cv2.cvtColor(resized, cv2.COLOR_BGR2GRAY)
    blurred = cv2.GaussianBlur(gray, BLUR_KERNEL, 0)
    _, binary = cv2.threshold(blurred, OCR_THRESHOLD, 255, cv2.THRESH_BINARY)
    return binary


class TileRecognizer:
    """Base recognizer: tries all four orientations and keeps the best read."""

    name = "base"

    def read(self, image: np.ndarray) -> tuple[str, float] | None:
        """Return (letter, confidence 0-100) for an upright tile image, or None."""
        raise NotImplementedError

    def recognize(self, frame: np.ndarray, rect: RotatedRect,
                  verbose: bool = False) -> str | None:
        image = preprocess_tile(frame, rect)

        best: tuple[str, float] | None = None
        for _ in range(4):
            image = cv2.rotate(image, cv2.ROTATE_90_CLOCKWISE)
            guess = self.read(image)
            if guess is not None and (best is None or guess[1] > best[1]):
                best = guess

        return _accept(best, verbose)


def _accept(guess: tuple[str, float] | None, verbose: bool) -> str | None:
    if guess is None or guess[1] <= OCR_CONFIDENCE_THRESHOLD:
        return None
    if verbose:
        print(f"Best guess: {guess[0]} (Confidence: {guess[1]:.0f})")
    return guess[0]


class TesseractRecognizer(TileRecognizer):
    """Tesseract in single-character mode, restricted to A-Z."""

    name = "tesseract"

    def __init__(self, lang: str = "eng") -> None:
        try:
            pytesseract.get_tesseract_version()
        except pytesseract.TesseractNotFoundError as e:
            raise RuntimeError("Could not initialize tesseract.") from e
        self.lang = lang
        self.config = (
            f"--oem 1 --psm 10 -c tessedit_char_whitelist={OCR_WHITELIST} "
            f"-c user_defined_dpi={OCR_DPI}"
        )

    def read(self, image: np.ndarray) -> tuple[str, float] | None:
        data = pytesseract.image_to_data(
            image, lang=self.lang, config=self.config,
            output_type=pytesseract.Output.DICT,
        )
        words = [
            (text.strip(), float(conf))
            for text, conf in zip(data["text"], data["conf"])
            if text.strip()
        ]
        # Exactly one recognized character, nothing else
        if len(words) != 1 or len(words[0][0]) != 1:
            return None
        return words[0]


class ClaudeRecognizer(TileRecognizer):
    """Claude Vision on the cropped tile. Orientation is left to the model."""

    name = "claude"

    def __init__(self, model: str = CLAUDE_MODEL) -> None:
        import anthropic

        self.client = anthropic.Anthropic()
        self.model = model

    def read(self, image: np.ndarray) -> tuple[str, float] | None:
        ok, encoded = cv2.imencode(".png", image)
        if not ok:
            raise ValueError("Could not encode tile image")
        image_data = base64.standard_b64encode(encoded.tobytes()).decode("utf-8")

        message = self.client.messages.create(
            model=self.model,
            max_tokens=16,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": "image/png",
                                "data": image_data,
                            },
                        },
                        {"type": "text", "text": TILE_PROMPT},
                    ],
                }
            ],
        )
        return _parse_reply(message.content[0].text)

    def recognize(self, frame: np.ndarray, rect: RotatedRect,
                  verbose: bool = False) -> str | None:
        return _accept(self.read(preprocess_tile(frame, rect)), verbose)


def _parse_reply(text: str) -> tuple[str, float] | None:
    """Parse a "<LETTER> <CONFIDENCE>" reply from the vision model."""
    match = re.search(r"\b([A-Za-z])\b\W*(\d{1,3})\b", text.strip())
    if match is None:
        return None
    confidence = min(float(match.group(2)), 100.0)
    return match.group(1).upper(), confidence


RECOGNIZERS: dict[str, type[TileRecognizer]] = {
    TesseractRecognizer.name: TesseractRecognizer,
    ClaudeRecognizer.name: ClaudeRecognizer,
}


def make_recognizer(name: str) -> TileRecognizer:
    """Instantiate a recognizer backend by name."""
    try:
        cls = RECOGNIZERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown OCR backend {name!r}; choose from {', '.join(RECOGNIZERS)}"
        ) from None
    return cls()


def recognize_tiles(frame: np.ndarray, rects: list[RotatedRect],
                    recognizer: TileRecognizer, verbose: bool = False) -> list[LetterTile]:
    """Recognize every detected tile, dropping those below the confidence threshold."""
    tiles: list[LetterTile] = []
    for rect in rects:
        letter = recognizer.recognize(frame, rect, verbose=verbose)
        if letter is not None:
            tiles.append(LetterTile.from_rect(letter, rect))
    return tiles
