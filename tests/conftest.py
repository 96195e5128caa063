"""Shared fixtures for Snatcher tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from snatcher.dictionary import AnagramIndex, Dictionary


@pytest.fixture
def small_index() -> AnagramIndex:
    """Hand-picked snatch targets added directly. No file I/O."""
    index = AnagramIndex()
    for w in [
        # too short, never indexed
        "AN", "NO", "ON", "PI", "IT",
        # 3-letter
        "PIT", "TIP",
        # 4-letter
        "MARE", "REAM",
        # 6-letter
        "TAMPER",
    ]:
        index.add(w)
    return index


@pytest.fixture
def board_dictionary() -> Dictionary:
    d = Dictionary()
    for w in ["PET", "RAM", "E", "CAT", "TIP", "PIT"]:
        d.add(w)
    return d


@pytest.fixture
def word_file(tmp_path: Path) -> Path:
    path = tmp_path / "words.txt"
    path.write_text("pit\nTIP\n\nAN\nTAMPER\nMARE\nream\nTIP\n")
    return path
