"""Split a byte buffer into runs of ASCII letters."""

import re
from collections.abc import Iterator

from ..core.models import MAX_WORD_LENGTH, Token

# Bytes >= 0x80 never match, so multi-byte UTF-8 sequences act as separators
_WORD_RE = re.compile(rb"[A-Za-z]+")


def tokenize(buffer: bytes) -> Iterator[Token]:
    """Yield each maximal run of ASCII letters with its byte span.

    Runs longer than MAX_WORD_LENGTH are truncated in ``word`` while ``end``
    still points past the full run; scanning resumes after the run.
    """
    for match in _WORD_RE.finditer(buffer):
        run = match.group()
        if len(run) > MAX_WORD_LENGTH:
            run = run[:MAX_WORD_LENGTH]
        yield Token(run.decode("ascii"), match.start(), match.end())
