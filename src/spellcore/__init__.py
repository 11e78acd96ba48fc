"""In-memory spellchecking engine for text-editing hosts."""

__version__ = "0.1.0"

from .core.models import MisspellingRecord, Token
from .core.settings import SpellcheckSettings
from .spellcheck import SpellChecker, WordList, levenshtein, rank_suggestions, tokenize

__all__ = [
    "MisspellingRecord",
    "SpellChecker",
    "SpellcheckSettings",
    "Token",
    "WordList",
    "levenshtein",
    "rank_suggestions",
    "tokenize",
    "__version__",
]
