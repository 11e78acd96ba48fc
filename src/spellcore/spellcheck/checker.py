"""Spellchecker owning the main, user and ignore word lists."""

import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO

from ..core.models import MisspellingRecord
from ..core.settings import SpellcheckSettings
from .suggestions import rank_suggestions
from .tokenizer import tokenize
from .wordlist import WordList

logger = logging.getLogger(__name__)

Source = str | os.PathLike | IO[str]


@contextmanager
def _open_lines(source: Source) -> Iterator[IO[str]]:
    """Yield a readable text stream for a path or an already-open stream."""
    if isinstance(source, (str, os.PathLike)):
        with open(source, encoding="utf-8") as f:
            yield f
    else:
        yield source


def _write_words_atomic(path: Path, words: list[str]) -> None:
    """Write one word per line via a temp file renamed over the target."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp", prefix="userdict_")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.writelines(f"{word}\n" for word in words)
        os.replace(tmp_path, path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def _validate_word(word: str) -> None:
    """Reject words that would not survive a save and reload of the user dictionary."""
    if not word or word.isspace():
        raise ValueError("Word must not be empty")
    if any(c.isspace() for c in word):
        raise ValueError(f"Word must not contain whitespace: {word!r}")


class SpellChecker:
    """Checks text against a main dictionary, a user dictionary and an ignore list.

    Each call to check() replaces the misspelling index with the records of
    that pass. Suggestions are drawn from the main dictionary only.
    Instances are not thread-safe.
    """

    def __init__(self, settings: SpellcheckSettings | None = None) -> None:
        self._settings = settings or SpellcheckSettings()
        self.main_dictionary = WordList()
        self.user_dictionary = WordList()
        self.ignored = WordList()  # Session only, never persisted
        self._misspellings: list[MisspellingRecord] = []

        self.enabled = self._settings.enabled
        self.suggestions_enabled = self._settings.suggestions_enabled
        self.max_suggestion_distance = self._settings.max_suggestion_distance
        self.max_suggestions = self._settings.max_suggestions

    @classmethod
    def from_settings(cls, settings: SpellcheckSettings) -> "SpellChecker":
        """Create a checker and load the dictionaries named in settings."""
        checker = cls(settings)
        main_path = settings.main_dictionary_file()
        if main_path is not None:
            checker.load_main_dict(main_path)
        else:
            logger.warning("No main dictionary configured; every word will be flagged")
        checker.load_user_dict()
        return checker

    @property
    def settings(self) -> SpellcheckSettings:
        return self._settings

    # --- Feature gates ---

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    def set_suggestions_enabled(self, enabled: bool) -> None:
        self.suggestions_enabled = enabled

    # --- Checking ---

    def is_correct(self, word: str) -> bool:
        """Return True if the word is empty, ignored, or in either dictionary."""
        if not word:
            return True
        # Ignore list first, then main, then user
        if self.ignored.contains(word):
            return True
        if self.main_dictionary.contains(word):
            return True
        return self.user_dictionary.contains(word)

    def check(self, text: str | bytes) -> None:
        """Rebuild the misspelling index for text.

        A str is encoded as UTF-8 first, so record positions are always byte
        offsets. If a MemoryError interrupts the pass the index keeps the
        records appended so far and the error propagates.
        """
        self._misspellings = []
        if not self.enabled:
            return

        buffer = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        if not buffer or buffer.isspace():
            return

        for token in tokenize(buffer):
            if not self.is_correct(token.word):
                self._misspellings.append(MisspellingRecord.from_token(token))

        logger.debug(
            "Checked %d bytes, %d misspellings", len(buffer), len(self._misspellings)
        )

    @property
    def misspellings(self) -> tuple[MisspellingRecord, ...]:
        """Records from the most recent check(), in text order."""
        return tuple(self._misspellings)

    def get_misspellings(self) -> tuple[MisspellingRecord, ...]:
        return self.misspellings

    def misspelled_at(self, offset: int) -> str | None:
        """Return the misspelled word covering a byte offset, if any."""
        for record in self._misspellings:
            if record.contains(offset):
                return record.word
            if record.start > offset:
                break
        return None

    def suggest(self, word: str) -> list[str]:
        """Get correction suggestions for a word from the main dictionary."""
        if not self.suggestions_enabled:
            return []
        return rank_suggestions(
            word,
            self.main_dictionary,
            max_distance=self.max_suggestion_distance,
            max_suggestions=self.max_suggestions,
        )

    # --- Word list edits ---

    def add_to_user_dict(self, word: str) -> None:
        """Add a word to the persistent user dictionary.

        The misspelling index is left as is; call check() again to refresh it.
        """
        _validate_word(word)
        if self.user_dictionary.insert(word):
            logger.debug("Added %r to user dictionary", word)

    def add_to_ignored(self, word: str) -> None:
        """Treat a word as correct for the rest of this session."""
        _validate_word(word)
        if self.ignored.insert(word):
            logger.debug("Ignoring %r", word)

    def clear_ignored(self) -> None:
        """Forget all session ignores."""
        self.ignored.clear()

    # --- Dictionary I/O ---

    def load_main_dict(self, source: Source) -> int:
        """Merge words from a main dictionary file or text stream.

        Lines starting with ``#`` are comments. A missing file raises
        FileNotFoundError. On any error the main dictionary is unchanged.

        Returns:
            Number of new words added.
        """
        if isinstance(source, (str, os.PathLike)) and not Path(source).exists():
            raise FileNotFoundError(f"Main dictionary '{os.fspath(source)}' not found")

        with _open_lines(source) as f:
            added = self.main_dictionary.bulk_load(f, skip_comments=True)

        if not self.main_dictionary:
            logger.warning("Main dictionary is empty; every word will be flagged")
        logger.debug("Loaded %d words into main dictionary", added)
        return added

    def load_user_dict(self, source: Source | None = None) -> int:
        """Merge words from the user dictionary.

        Every non-empty line is a word; ``#`` has no special meaning here.
        A missing file is not an error since a user may not have added any
        words yet.

        Returns:
            Number of new words added.
        """
        if source is None:
            source = self._settings.user_dictionary_file()

        if isinstance(source, (str, os.PathLike)) and not Path(source).exists():
            logger.debug("No user dictionary at %s", os.fspath(source))
            return 0

        with _open_lines(source) as f:
            added = self.user_dictionary.bulk_load(f)

        logger.debug("Loaded %d words into user dictionary", added)
        return added

    def save_user_dict(self, sink: Source | None = None) -> None:
        """Write the user dictionary, one word per line in sorted order."""
        if sink is None:
            sink = self._settings.user_dictionary_file()

        words = list(self.user_dictionary)
        if isinstance(sink, (str, os.PathLike)):
            _write_words_atomic(Path(sink), words)
        else:
            sink.writelines(f"{word}\n" for word in words)
        logger.debug("Saved %d words to user dictionary", len(words))
