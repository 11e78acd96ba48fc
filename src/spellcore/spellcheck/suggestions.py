"""Rank correction candidates by edit distance."""

from collections.abc import Iterable

from ..core.settings import DEFAULT_MAX_SUGGESTION_DISTANCE, DEFAULT_MAX_SUGGESTIONS
from .distance import levenshtein


def rank_suggestions(
    word: str,
    candidates: Iterable[str],
    max_distance: int = DEFAULT_MAX_SUGGESTION_DISTANCE,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
) -> list[str]:
    """Return up to max_suggestions candidates within max_distance edits of word.

    Exact matches (distance 0) are never suggested. Results are ordered by
    ascending distance; equal distances keep the order the candidates were
    scanned in.
    """
    scored: list[tuple[int, str]] = []
    for candidate in candidates:
        # Length difference is a lower bound on the distance
        if abs(len(candidate) - len(word)) > max_distance:
            continue
        distance = levenshtein(word, candidate)
        if 0 < distance <= max_distance:
            scored.append((distance, candidate))

    scored.sort(key=lambda item: item[0])
    return [candidate for _, candidate in scored[:max_suggestions]]
