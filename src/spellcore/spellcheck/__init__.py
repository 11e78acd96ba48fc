"""Spellcheck engine: word lists, tokenizer, suggestions and the checker."""

from .checker import SpellChecker
from .distance import levenshtein
from .suggestions import rank_suggestions
from .tokenizer import tokenize
from .wordlist import WordList, fold

__all__ = ["SpellChecker", "WordList", "fold", "levenshtein", "rank_suggestions", "tokenize"]
