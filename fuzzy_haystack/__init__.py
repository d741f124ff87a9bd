"""
Fuzzy Haystack - lightweight fuzzy text matching for search-as-you-type.

Given a query and a collection of candidate strings, returns a ranked,
deduplicated subset of candidates using substring, scrambled-token and
edit-distance matching.
"""

__version__ = "2.2.0"

from .core.distance import levenshtein
from .core.engine import Haystack
from .core.normalizer import tokenize
from .engine_instance import search
from .logging_config import configure_logging
from .models.candidates import KeyedCandidates, OrderedCandidates
from .models.options import SearchOptions
from .models.response import MatchTier, SearchResponse, SearchResult

__all__ = [
    "Haystack",
    "SearchOptions",
    "OrderedCandidates",
    "KeyedCandidates",
    "MatchTier",
    "SearchResult",
    "SearchResponse",
    "configure_logging",
    "levenshtein",
    "search",
    "tokenize",
]
