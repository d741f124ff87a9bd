"""Deduplication and edit-distance ranking of raw matches."""

from typing import Dict, Iterable, List, Tuple

from ..models.candidates import Candidate
from ..models.response import MatchTier, SearchResult
from .distance import levenshtein
from .fuzzy_matcher import Match


def deduplicate(matches: Iterable[Match]) -> List[Tuple[Candidate, List[MatchTier]]]:
    """
    Remove repeated candidates, keeping first-seen order.

    Candidates are equal when their original values are equal. The tiers of
    dropped duplicates are merged into the entry that was kept.

    Args:
        matches: Raw matches from the matcher

    Returns:
        List of (candidate, tiers) pairs
    """
    seen: Dict[str, Tuple[Candidate, List[MatchTier]]] = {}

    for candidate, tier in matches:
        entry = seen.get(candidate.value)
        if entry is None:
            seen[candidate.value] = (candidate, [tier])
        elif tier not in entry[1]:
            entry[1].append(tier)

    return list(seen.values())


def rank(entries: Iterable[Tuple[Candidate, List[MatchTier]]], query: str) -> List[SearchResult]:
    """
    Order entries by ascending edit distance to the query.

    The sort is stable, so entries at the same distance keep their order.

    Args:
        entries: Deduplicated (candidate, tiers) pairs
        query: Normalized query

    Returns:
        Ranked search results
    """
    results = [
        SearchResult(
            value=candidate.value,
            index=candidate.index,
            key=candidate.key,
            edit_distance=levenshtein(query, candidate.folded),
            tiers=tiers
        )
        for candidate, tiers in entries
    ]
    return sorted(results, key=lambda result: result.edit_distance)
