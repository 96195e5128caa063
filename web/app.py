"""Snatcher web API, Flask backend."""
from __future__ import annotations

import base64
import binascii
import sys
from pathlib import Path

import anthropic
import cv2
import numpy as np

# Ensure project root is on sys.path so `snatcher.*` imports work
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, jsonify, request

from snatcher.pipeline import FrameProcessor, FrameResult


def _decode_image(image_data: str) -> np.ndarray | None:
    """Decode a base64 image (optionally a data URL) into a BGR frame."""
    # Strip data URL prefix if present
    if "," in image_data:
        image_data = image_data.split(",", 1)[1]
    try:
        raw = base64.b64decode(image_data, validate=True)
    except (binascii.Error, ValueError):
        return None
    return cv2.imdecode(np.frombuffer(raw, dtype=np.uint8), cv2.IMREAD_COLOR)


def result_to_json(result: FrameResult) -> dict:
    return {
        "words": result.words,
        "invalid_words": result.invalid_words,
        "snatches": result.snatches,
        "tiles": [
            {
                "letter": t.letter,
                "center": [t.center_x, t.center_y],
                "size": [t.width, t.height],
                "angle": t.angle,
            }
            for t in result.tiles
        ],
    }


def create_app(processor: FrameProcessor) -> Flask:
    """Build the app around a processor whose word lists are already loaded."""
    app = Flask(__name__)
    app.config["PROCESSOR"] = processor

    @app.route("/health")
    def health():
        return jsonify({
            "status": "ok",
            "anagram_groups": len(processor.snatch_detector.index),
        })

    @app.route("/snatch", methods=["POST"])
    def snatch():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), 400
        words = data.get("words")
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            return jsonify({"error": "Expected a list of words"}), 400

        words = [w.strip().upper() for w in words if w.strip()]
        unique = data.get("unique")
        result = processor.process_words(words, unique=None if unique is None else bool(unique))
        return jsonify(result_to_json(result))

    @app.route("/frame", methods=["POST"])
    def frame():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), 400
        image_data = data.get("image", "")
        if not image_data:
            return jsonify({"error": "No image provided"}), 400

        image = _decode_image(image_data)
        if image is None:
            return jsonify({"error": "Could not decode image"}), 400

        try:
            result = processor.process(image)
        except (RuntimeError, ValueError, anthropic.APIError) as e:
            print(f"Frame processing failed: {e}")
            return jsonify({"error": f"Recognition failed: {e}"}), 500
        return jsonify(result_to_json(result))

    return app


if __name__ == "__main__":
    from snatcher.dictionary import load_default_index
    from snatcher.ocr import make_recognizer
    from snatcher.snatch import SnatchDetector

    index = load_default_index()
    print(f"Dictionary loaded: {index.word_count} words")
    processor = FrameProcessor(SnatchDetector(index), recognizer=make_recognizer("tesseract"))
    create_app(processor).run(debug=True, host="0.0.0.0", port=8080)
