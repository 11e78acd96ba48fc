"""Core models and settings for spellcore."""

from .models import MAX_WORD_LENGTH, MisspellingRecord, Token
from .settings import SpellcheckSettings, get_config_dir, get_data_dir

__all__ = [
    "MAX_WORD_LENGTH",
    "MisspellingRecord",
    "Token",
    "SpellcheckSettings",
    "get_config_dir",
    "get_data_dir",
]
