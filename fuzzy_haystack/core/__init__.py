"""Core search engine functionality."""

from .distance import levenshtein, within_distance
from .engine import Haystack
from .fuzzy_matcher import FuzzyMatcher, Match
from .normalizer import QueryNormalizer, tokenize
from .ranker import deduplicate, rank

__all__ = [
    "Haystack",
    "FuzzyMatcher",
    "Match",
    "QueryNormalizer",
    "tokenize",
    "levenshtein",
    "within_distance",
    "deduplicate",
    "rank",
]
