"""Settings management for spellcore."""

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from appdirs import user_config_dir, user_data_dir

logger = logging.getLogger(__name__)

APP_NAME = "spellcore"
APP_AUTHOR = "spellcore"

SETTINGS_FILENAME = "settings.json"
USER_DICT_FILENAME = "user_dictionary.txt"

DEFAULT_MAX_SUGGESTION_DISTANCE = 2
DEFAULT_MAX_SUGGESTIONS = 5


def get_config_dir() -> Path:
    """Get the configuration directory."""
    path = Path(user_config_dir(APP_NAME, APP_AUTHOR))
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Get the data directory."""
    path = Path(user_data_dir(APP_NAME, APP_AUTHOR))
    path.mkdir(parents=True, exist_ok=True)
    return path


@dataclass
class SpellcheckSettings:
    """Spellchecker settings."""

    enabled: bool = True
    suggestions_enabled: bool = True
    max_suggestion_distance: int = DEFAULT_MAX_SUGGESTION_DISTANCE
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
    main_dictionary_path: str = ""  # empty = no main dictionary configured
    user_dictionary_path: str = ""  # empty = user_dictionary.txt in the data dir

    def user_dictionary_file(self) -> Path:
        """Resolve where the user dictionary lives."""
        if self.user_dictionary_path:
            return Path(self.user_dictionary_path).expanduser()
        return get_data_dir() / USER_DICT_FILENAME

    def main_dictionary_file(self) -> Path | None:
        if not self.main_dictionary_path:
            return None
        return Path(self.main_dictionary_path).expanduser()

    @classmethod
    def load(cls, path: Path | None = None) -> "SpellcheckSettings":
        """Load settings from file."""
        if path is None:
            path = get_config_dir() / SETTINGS_FILENAME

        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            return cls._from_dict(data)
        except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Ignoring malformed settings file %s: %s", path, e)
            return cls()

    def save(self, path: Path | None = None) -> None:
        """Save settings to file."""
        if path is None:
            path = get_config_dir() / SETTINGS_FILENAME

        path.parent.mkdir(parents=True, exist_ok=True)

        # Atomic write: write to temp file then rename to prevent corruption on crash
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp", prefix="settings_")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._to_dict(), f, indent=2)
            os.replace(tmp_path, path)  # Atomic on POSIX
        except Exception:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise

    @staticmethod
    def _validate_int(value, default: int, min_val: int = 0, max_val: int | None = None) -> int:
        """Validate and constrain an integer value."""
        if not isinstance(value, int) or isinstance(value, bool):
            return default
        if value < min_val:
            return min_val
        if max_val is not None and value > max_val:
            return max_val
        return value

    @staticmethod
    def _validate_bool(value, default: bool) -> bool:
        return value if isinstance(value, bool) else default

    @staticmethod
    def _validate_str(value, default: str) -> str:
        return value if isinstance(value, str) else default

    @classmethod
    def _from_dict(cls, data: dict) -> "SpellcheckSettings":
        """Create settings from a dictionary with validation."""
        settings = cls()
        settings.enabled = cls._validate_bool(data.get("enabled"), settings.enabled)
        settings.suggestions_enabled = cls._validate_bool(
            data.get("suggestions_enabled"), settings.suggestions_enabled
        )
        settings.max_suggestion_distance = cls._validate_int(
            data.get("max_suggestion_distance"),
            DEFAULT_MAX_SUGGESTION_DISTANCE,
            min_val=1,
            max_val=5,
        )
        settings.max_suggestions = cls._validate_int(
            data.get("max_suggestions"), DEFAULT_MAX_SUGGESTIONS, min_val=1, max_val=50
        )
        settings.main_dictionary_path = cls._validate_str(
            data.get("main_dictionary_path"), settings.main_dictionary_path
        )
        settings.user_dictionary_path = cls._validate_str(
            data.get("user_dictionary_path"), settings.user_dictionary_path
        )
        return settings

    def _to_dict(self) -> dict:
        return {
            "enabled": self.enabled,
            "suggestions_enabled": self.suggestions_enabled,
            "max_suggestion_distance": self.max_suggestion_distance,
            "max_suggestions": self.max_suggestions,
            "main_dictionary_path": self.main_dictionary_path,
            "user_dictionary_path": self.user_dictionary_path,
        }
