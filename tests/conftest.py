"""Shared test fixtures for spellcore tests."""

import io

import pytest

from spellcore.core import settings as settings_module
from spellcore.spellcheck import SpellChecker

SAMPLE_WORDS = ["hello", "world", "the", "quick", "brown", "fox"]


@pytest.fixture
def sample_words():
    return list(SAMPLE_WORDS)


@pytest.fixture
def main_dict_file(tmp_path, sample_words):
    path = tmp_path / "main.txt"
    path.write_text("\n".join(sample_words) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Keep config and data directories inside the test's tmp_path."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"

    def fake_config_dir():
        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir

    def fake_data_dir():
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    monkeypatch.setattr(settings_module, "get_config_dir", fake_config_dir)
    monkeypatch.setattr(settings_module, "get_data_dir", fake_data_dir)
    return config_dir, data_dir


@pytest.fixture
def checker(sample_words):
    sc = SpellChecker()
    sc.load_main_dict(io.StringIO("\n".join(sample_words)))
    return sc
