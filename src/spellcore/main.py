#!/usr/bin/env python3
"""Command-line entry point for spellcore."""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .core.settings import SpellcheckSettings
from .spellcheck import SpellChecker

EXIT_CLEAN = 0
EXIT_MISSPELLED = 1
EXIT_ERROR = 2


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spellcore",
        description="Report misspelled words and their byte positions.",
    )
    parser.add_argument("files", nargs="*", help="files to check ('-' for stdin)")
    parser.add_argument("-d", "--dict", dest="main_dict", help="main dictionary file")
    parser.add_argument("-u", "--user-dict", dest="user_dict", help="user dictionary file")
    parser.add_argument("--config", help="settings file (JSON)")
    parser.add_argument(
        "-s", "--suggest", action="store_true", help="show suggestions for each misspelling"
    )
    parser.add_argument(
        "--add",
        action="append",
        default=[],
        metavar="WORD",
        help="add WORD to the user dictionary and save it",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="WORD",
        help="treat WORD as correct for this run",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_input(name: str) -> bytes:
    if name == "-":
        return sys.stdin.buffer.read()
    return Path(name).read_bytes()


def _report(checker: SpellChecker, name: str, show_suggestions: bool) -> int:
    """Print the misspellings of the last check. Returns how many there were."""
    for record in checker.misspellings:
        line = f"{name}:{record.start}-{record.end}: {record.word}"
        if show_suggestions:
            suggestions = checker.suggest(record.word)
            if suggestions:
                line += f" -> {', '.join(suggestions)}"
        print(line)
    return len(checker.misspellings)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    settings = SpellcheckSettings.load(Path(args.config) if args.config else None)
    if args.main_dict:
        settings.main_dictionary_path = args.main_dict
    if args.user_dict:
        settings.user_dictionary_path = args.user_dict

    try:
        checker = SpellChecker.from_settings(settings)
        for word in args.ignore:
            checker.add_to_ignored(word)
        if args.add:
            for word in args.add:
                checker.add_to_user_dict(word)
            checker.save_user_dict()
    except (OSError, ValueError) as e:
        logger.error(f"{e}")
        return EXIT_ERROR

    files = args.files
    if not files and not args.add:
        files = ["-"]

    found = 0
    for name in files:
        try:
            data = _read_input(name)
        except OSError as e:
            logger.error(f"Failed to read {name}: {e}")
            return EXIT_ERROR
        checker.check(data)
        found += _report(checker, "<stdin>" if name == "-" else name, args.suggest)

    return EXIT_MISSPELLED if found else EXIT_CLEAN


if __name__ == "__main__":
    sys.exit(main())
