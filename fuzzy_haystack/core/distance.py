"""Edit distance helpers used by the fuzzy tier and the ranker."""

from typing import Optional

from rapidfuzz.distance import Levenshtein


def levenshtein(first: str, second: str, score_cutoff: Optional[int] = None) -> int:
    """
    Calculate the Levenshtein distance between two strings.

    Insertions, deletions and substitutions all cost 1. The distance to an
    empty string is the length of the other string.

    Args:
        first: First string
        second: Second string
        score_cutoff: Stop early once the distance exceeds this value

    Returns:
        Edit distance, or ``score_cutoff + 1`` when the cutoff is exceeded
    """
    if not first or not second:
        distance = len(first or second)
        if score_cutoff is not None and distance > score_cutoff:
            return score_cutoff + 1
        return distance

    return Levenshtein.distance(first, second, score_cutoff=score_cutoff)


def within_distance(first: str, second: str, threshold: int) -> bool:
    """Check whether two strings are at most ``threshold`` edits apart."""
    if threshold < 0:
        return False
    return levenshtein(first, second, score_cutoff=threshold) <= threshold
