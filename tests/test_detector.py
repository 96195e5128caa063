"""Tests for tile detection on synthetic board images."""

from __future__ import annotations

import numpy as np
import pytest

from snatcher.detector import detect_tiles, preprocess_frame
from tests.helpers import board_image


class TestPreprocessFrame:
    def test_binary_output(self) -> None:
        binary = preprocess_frame(board_image([(50, 50, 40, 40)]))
        assert binary.ndim == 2
        assert set(np.unique(binary)) <= {0, 255}
        assert binary[70, 70] == 255
        assert binary[10, 10] == 0

    def test_accepts_grayscale(self) -> None:
        gray = board_image([(50, 50, 40, 40)])[:, :, 0]
        assert preprocess_frame(gray).shape == gray.shape

    def test_dim_tiles_ignored(self) -> None:
        frame = board_image([(50, 50, 40, 40)])
        frame[frame == 255] = 150
        assert not preprocess_frame(frame).any()


class TestDetectTiles:
    def test_empty_board(self) -> None:
        assert detect_tiles(board_image([])) == []

    def test_finds_square_tiles(self) -> None:
        frame = board_image([(50, 50, 40, 40), (200, 120, 40, 40)])
        tiles = detect_tiles(frame)
        assert len(tiles) == 2
        centers = sorted((round(cx), round(cy)) for (cx, cy), _, _ in tiles)
        assert centers[0] == pytest.approx((70, 70), abs=2)
        assert centers[1] == pytest.approx((220, 140), abs=2)
        for _, (w, h), _ in tiles:
            assert w == pytest.approx(40, abs=5)
            assert h == pytest.approx(40, abs=5)

    def test_elongated_shapes_rejected(self) -> None:
        frame = board_image([(50, 50, 40, 40), (150, 200, 120, 20)])
        tiles = detect_tiles(frame)
        assert len(tiles) == 1

    def test_verbose_prints_count(self, capsys: pytest.CaptureFixture[str]) -> None:
        detect_tiles(board_image([(50, 50, 40, 40)]), verbose=True)
        assert "Number of tiles detected: 1" in capsys.readouterr().out
