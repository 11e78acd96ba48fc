"""Tests for the command-line entry point."""

import io
import json

from spellcore.main import EXIT_CLEAN, EXIT_ERROR, EXIT_MISSPELLED, main


def test_reports_misspellings(tmp_path, main_dict_file, capsys):
    text = tmp_path / "doc.txt"
    text.write_text("helo wrld", encoding="utf-8")
    assert main(["-d", str(main_dict_file), str(text)]) == EXIT_MISSPELLED
    out = capsys.readouterr().out.splitlines()
    assert out == [f"{text}:0-4: helo", f"{text}:5-9: wrld"]


def test_clean_file(tmp_path, main_dict_file, capsys):
    text = tmp_path / "doc.txt"
    text.write_text("Hello, WORLD!", encoding="utf-8")
    assert main(["-d", str(main_dict_file), str(text)]) == EXIT_CLEAN
    assert capsys.readouterr().out == ""


def test_suggestions_shown(tmp_path, main_dict_file, capsys):
    text = tmp_path / "doc.txt"
    text.write_text("helo", encoding="utf-8")
    main(["-d", str(main_dict_file), "-s", str(text)])
    assert capsys.readouterr().out.strip() == f"{text}:0-4: helo -> hello"


def test_ignore_option(tmp_path, main_dict_file, capsys):
    text = tmp_path / "doc.txt"
    text.write_text("helo wrld", encoding="utf-8")
    main(["-d", str(main_dict_file), "--ignore", "helo", str(text)])
    assert capsys.readouterr().out.strip() == f"{text}:5-9: wrld"


def test_add_saves_user_dict(tmp_path, main_dict_file):
    user = tmp_path / "user.txt"
    rc = main(["-d", str(main_dict_file), "-u", str(user), "--add", "wrld", "--add", "Helo"])
    assert rc == EXIT_CLEAN
    assert user.read_text(encoding="utf-8") == "Helo\nwrld\n"

    text = tmp_path / "doc.txt"
    text.write_text("helo wrld", encoding="utf-8")
    assert main(["-d", str(main_dict_file), "-u", str(user), str(text)]) == EXIT_CLEAN


def test_reads_stdin(main_dict_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"the quik fox")))
    assert main(["-d", str(main_dict_file)]) == EXIT_MISSPELLED
    assert capsys.readouterr().out.strip() == "<stdin>:4-8: quik"


def test_missing_main_dict(tmp_path):
    assert main(["-d", str(tmp_path / "missing.txt"), "-"]) == EXIT_ERROR


def test_missing_input_file(tmp_path, main_dict_file):
    assert main(["-d", str(main_dict_file), str(tmp_path / "absent.txt")]) == EXIT_ERROR


def test_empty_add_word_is_error(main_dict_file):
    assert main(["-d", str(main_dict_file), "--add", ""]) == EXIT_ERROR


def test_config_file(tmp_path, main_dict_file, capsys):
    config = tmp_path / "settings.json"
    config.write_text(
        json.dumps({"main_dictionary_path": str(main_dict_file), "enabled": False}),
        encoding="utf-8",
    )
    text = tmp_path / "doc.txt"
    text.write_text("helo wrld", encoding="utf-8")
    assert main(["--config", str(config), str(text)]) == EXIT_CLEAN
    assert capsys.readouterr().out == ""
