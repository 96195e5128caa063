"""Tests for finding snatchable words."""

from __future__ import annotations

from pathlib import Path

from snatcher.dictionary import AnagramIndex, load_default_index
from snatcher.snatch import SnatchDetector, find_snatchable_words


class TestFindSnatchableWords:
    def test_no_words(self, small_index: AnagramIndex) -> None:
        assert find_snatchable_words([], small_index) == []

    def test_single_word_cannot_be_snatched(self, small_index: AnagramIndex) -> None:
        # TIP is an anagram of PIT but a snatch needs two words
        assert find_snatchable_words(["PIT"], small_index) == []

    def test_single_letters_no_snatchable(self, small_index: AnagramIndex) -> None:
        assert find_snatchable_words(["O", "A", "N"], small_index) == []

    def test_single_letters_snatchable(self, small_index: AnagramIndex) -> None:
        snatchable = find_snatchable_words(["P", "I", "T"], small_index)
        assert len(snatchable) == 2
        assert set(snatchable) == {"PIT", "TIP"}

    def test_two_words_combine(self, small_index: AnagramIndex) -> None:
        assert find_snatchable_words(["PET", "RAM"], small_index) == ["TAMPER"]

    def test_any_subset_counts(self, small_index: AnagramIndex) -> None:
        snatchable = find_snatchable_words(["PET", "RAM", "E"], small_index)
        assert set(snatchable) == {"TAMPER", "MARE", "REAM"}

    def test_non_contiguous_subset(self, small_index: AnagramIndex) -> None:
        # RAM and E are not next to each other in the list
        snatchable = find_snatchable_words(["RAM", "XYZ", "E"], small_index)
        assert sorted(snatchable) == ["MARE", "REAM"]

    def test_short_combinations_never_match(self, small_index: AnagramIndex) -> None:
        # AN and NO are in the source list but too short to be indexed
        assert find_snatchable_words(["A", "N"], small_index) == []
        assert find_snatchable_words(["N", "O"], small_index) == []

    def test_lowercase_board_words(self, small_index: AnagramIndex) -> None:
        assert find_snatchable_words(["pet", "ram"], small_index) == ["TAMPER"]

    def test_duplicates_reported_per_subset(self) -> None:
        index = AnagramIndex()
        index.add("TEA")
        # {T, EA} and {T, EA'} both spell TEA
        snatchable = find_snatchable_words(["T", "EA", "EA"], index)
        assert snatchable == ["TEA", "TEA"]

    def test_unique_removes_duplicates(self) -> None:
        index = AnagramIndex()
        for w in ["TEA", "EAT"]:
            index.add(w)
        snatchable = find_snatchable_words(["T", "EA", "EA"], index, unique=True)
        assert snatchable == ["TEA", "EAT"]

    def test_duplicate_board_words_combine(self) -> None:
        index = AnagramIndex()
        index.add("DODO")
        assert find_snatchable_words(["DO", "DO"], index) == ["DODO"]

    def test_every_anagram_in_group_returned(self) -> None:
        index = AnagramIndex()
        for w in ["STOP", "POTS", "TOPS", "SPOT", "OPTS", "POST"]:
            index.add(w)
        snatchable = find_snatchable_words(["TOP", "S"], index)
        assert sorted(snatchable) == ["OPTS", "POST", "POTS", "SPOT", "STOP", "TOPS"]


class TestSnatchDetector:
    def test_uses_its_own_index(self, small_index: AnagramIndex) -> None:
        detector = SnatchDetector(small_index)
        assert set(detector.find_snatches(["P", "I", "T"])) == {"PIT", "TIP"}

    def test_empty_index(self) -> None:
        detector = SnatchDetector(AnagramIndex())
        assert detector.find_snatches(["PET", "RAM"]) == []

    def test_unique_flag(self) -> None:
        index = AnagramIndex()
        index.add("TEA")
        detector = SnatchDetector(index)
        assert detector.find_snatches(["T", "EA", "EA"], unique=True) == ["TEA"]

    def test_rebuilt_index_gives_same_results(self, word_file: Path) -> None:
        board = ["PET", "RAM", "E", "P", "I", "T"]
        first = SnatchDetector(load_default_index(word_file)).find_snatches(board)
        second = SnatchDetector(load_default_index(word_file)).find_snatches(board)
        assert first == second
        assert {"TAMPER", "MARE", "ream", "pit", "TIP"} <= set(first)
