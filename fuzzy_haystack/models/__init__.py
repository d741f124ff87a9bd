"""Data models for fuzzy haystack."""

from .candidates import (
    Candidate,
    Candidates,
    KeyedCandidates,
    OrderedCandidates,
    as_candidates,
)
from .options import SearchOptions
from .response import MatchTier, SearchResponse, SearchResult

__all__ = [
    "Candidate",
    "Candidates",
    "KeyedCandidates",
    "OrderedCandidates",
    "as_candidates",
    "SearchOptions",
    "MatchTier",
    "SearchResponse",
    "SearchResult",
]
