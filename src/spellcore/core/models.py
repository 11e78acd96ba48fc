"""Core data models for spellcore."""

from dataclasses import dataclass
from typing import NamedTuple

# Longest word the tokenizer will emit; longer letter runs are truncated.
MAX_WORD_LENGTH = 255


class Token(NamedTuple):
    """A run of ASCII letters found in a text buffer."""

    word: str
    start: int  # Byte offset of the first letter
    end: int  # One past the last letter of the full run


@dataclass(frozen=True)
class MisspellingRecord:
    """A misspelled token and its byte span in the checked text."""

    word: str  # Original casing preserved
    start: int
    end: int

    def contains(self, offset: int) -> bool:
        """Return True if the byte offset falls inside this record."""
        return self.start <= offset < self.end

    @classmethod
    def from_token(cls, token: Token) -> "MisspellingRecord":
        return cls(word=token.word, start=token.start, end=token.end)
