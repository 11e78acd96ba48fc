"""Case-folded sorted word list."""

import string
from bisect import bisect_left, insort
from collections.abc import Iterable, Iterator

# ASCII-only folding: non-ASCII letters keep their code point
_FOLD_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def fold(word: str) -> str:
    """Lower-case ASCII letters only; the ordering key for every WordList."""
    return word.translate(_FOLD_TABLE)


def _dedupe_sorted(words: list[str]) -> list[str]:
    """Drop folded duplicates from a sorted list, keeping the first of each run."""
    result: list[str] = []
    previous: str | None = None
    for word in words:
        key = fold(word)
        if key != previous:
            result.append(word)
            previous = key
    return result


class WordList:
    """Words kept in case-folded sorted order with no folded duplicates.

    Lookups are binary searches over the folded keys, so a list holding
    "Hello" answers True for "hello", "HELLO" and "hElLo". The original
    casing of the first spelling inserted is what iteration yields.
    """

    def __init__(self, words: Iterable[str] | None = None) -> None:
        self._words: list[str] = []
        if words is not None:
            self._words = _dedupe_sorted(sorted(words, key=fold))

    def __len__(self) -> int:
        return len(self._words)

    def __bool__(self) -> bool:
        return bool(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __repr__(self) -> str:
        return f"WordList({len(self._words)} words)"

    def _index_of(self, word: str) -> int:
        """Return the position of word, or -1 if absent."""
        key = fold(word)
        i = bisect_left(self._words, key, key=fold)
        if i < len(self._words) and fold(self._words[i]) == key:
            return i
        return -1

    def contains(self, word: str) -> bool:
        """Case-insensitive membership test."""
        return self._index_of(word) >= 0

    def insert(self, word: str) -> bool:
        """Insert word in sorted position. Returns False if already present."""
        if self.contains(word):
            return False
        insort(self._words, word, key=fold)
        return True

    def clear(self) -> None:
        self._words = []

    def bulk_load(self, lines: Iterable[str], skip_comments: bool = False) -> int:
        """Merge words from an iterable of lines, one word per line.

        Trailing whitespace is trimmed and empty lines are skipped. With
        skip_comments, lines whose first non-blank character is ``#`` are
        skipped too. The list is re-sorted once after the whole input is read
        and only then replaced, so an exception raised while reading leaves
        the current contents untouched.

        Returns:
            Number of new words added.
        """
        incoming: list[str] = []
        for line in lines:
            word = line.rstrip()
            if not word:
                continue
            if skip_comments and word.lstrip().startswith("#"):
                continue
            incoming.append(word)

        # Stable sort: existing words win over incoming duplicates
        merged = _dedupe_sorted(sorted(self._words + incoming, key=fold))
        added = len(merged) - len(self._words)
        self._words = merged
        return added
