"""Word lists: a trie for checking board words and an anagram index for snatches."""

from __future__ import annotations

from collections import defaultdict
from pathlib import Path

from snatcher.constants import BOARD_WORDS_FILE, MIN_SNATCH_LENGTH, SNATCH_WORDS_FILE

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def _read_words(path: str | Path) -> list[str]:
    with open(path) as f:
        return [line.strip() for line in f if line.strip()]


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Dictionary:
    """Trie-backed word list used to tell real board words from misreads."""

    def __init__(self, min_length: int = 1) -> None:
        self.root = TrieNode()
        self.min_length = min_length
        self._word_count = 0

    def load(self, path: str | Path) -> None:
        """Load words from a file (one word per line)."""
        for word in _read_words(path):
            self.add(word)

    def add(self, word: str) -> None:
        word = word.upper()
        if len(word) < self.min_length:
            return
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._word_count += 1

    def _find(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix.upper():
            if ch not in node.children:
                return None
            node = node.children[ch]
        return node

    def is_valid_word(self, word: str) -> bool:
        node = self._find(word)
        return node is not None and node.is_word

    def __contains__(self, word: str) -> bool:
        return self.is_valid_word(word)

    @property
    def word_count(self) -> int:
        return self._word_count


def anagram_key(word: str) -> str:
    """Canonical form shared by all anagrams: upper-cased, letters sorted."""
    return "".join(sorted(word.upper()))


class AnagramIndex:
    """Dictionary words grouped by anagram key.

    Only words of at least MIN_SNATCH_LENGTH letters are indexed, since a
    snatch always combines two or more words. Read-only once loaded.
    """

    def __init__(self) -> None:
        self._groups: dict[str, list[str]] = defaultdict(list)
        self._word_count = 0

    def load(self, path: str | Path) -> None:
        """Load words from a file (one word per line).

        Raises OSError (e.g. FileNotFoundError) when the file cannot be read.
        """
        for word in _read_words(path):
            self.add(word)

    def add(self, word: str) -> None:
        if len(word) < MIN_SNATCH_LENGTH:
            return
        group = self._groups[anagram_key(word)]
        if word not in group:
            group.append(word)
            self._word_count += 1

    def lookup(self, letters: str) -> list[str]:
        """All indexed words that are anagrams of *letters*."""
        return list(self._groups.get(anagram_key(letters), ()))

    def __contains__(self, letters: str) -> bool:
        return anagram_key(letters) in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    @property
    def word_count(self) -> int:
        return self._word_count


def _default_path(filename: str) -> Path:
    path = DATA_DIR / filename
    if not path.exists():
        raise FileNotFoundError(
            f"Word list not found at {path}. "
            f"Download it and place it at data/{filename}"
        )
    return path


def load_default_index(path: str | Path | None = None) -> AnagramIndex:
    """Load the snatch target word list (Collins Scrabble Words by default)."""
    index = AnagramIndex()
    index.load(path if path is not None else _default_path(SNATCH_WORDS_FILE))
    return index


def load_default_dictionary(path: str | Path | None = None) -> Dictionary:
    """Load the board word list (popular English words by default)."""
    d = Dictionary()
    d.load(path if path is not None else _default_path(BOARD_WORDS_FILE))
    return d
