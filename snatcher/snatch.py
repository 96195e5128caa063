"""Find dictionary words that can be snatched by combining board words."""

from __future__ import annotations

from itertools import combinations

from snatcher.dictionary import AnagramIndex, anagram_key


def find_snatchable_words(board_words: list[str], index: AnagramIndex,
                          unique: bool = False) -> list[str]:
    """Every indexed word formed from the letters of two or more board words.

    All subsets of size >= 2 are tried, so the cost grows as 2**n in the
    number of board words. Each subset's words are joined in board order,
    keyed, and looked up. A word reachable from several subsets is reported
    once per subset unless *unique* is set.
    """
    snatches: list[str] = []
    for size in range(2, len(board_words) + 1):
        for subset in combinations(board_words, size):
            snatches.extend(index.lookup(anagram_key("".join(subset))))

    if unique:
        snatches = list(dict.fromkeys(snatches))
    return snatches


class SnatchDetector:
    """Owns a loaded anagram index and answers snatch queries against it."""

    def __init__(self, index: AnagramIndex) -> None:
        self.index = index

    def find_snatches(self, board_words: list[str], unique: bool = False) -> list[str]:
        return find_snatchable_words(board_words, self.index, unique=unique)
