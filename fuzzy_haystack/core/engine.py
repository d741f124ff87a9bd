"""Main search engine implementation."""

import time
from typing import Any, List, Mapping, Optional, Union

import structlog

from ..models.candidates import as_candidates
from ..models.options import SearchOptions
from ..models.response import SearchResponse
from .fuzzy_matcher import FuzzyMatcher
from .normalizer import QueryNormalizer, tokenize
from .ranker import deduplicate, rank

logger = structlog.get_logger(__name__)


class Haystack:
    """Fuzzy search engine over in-memory candidate collections."""

    def __init__(
        self,
        options: Optional[Union[SearchOptions, Mapping[str, Any]]] = None,
        **overrides: Any
    ) -> None:
        """
        Initialize the search engine.

        Unspecified options fall back to their defaults.

        Args:
            options: SearchOptions, or a mapping of option overrides
                (snake_case or camelCase names)
            **overrides: Option overrides applied on top of ``options``
        """
        if isinstance(options, SearchOptions):
            base, extra = options, {}
        else:
            base, extra = SearchOptions(), dict(options or {})

        extra.update(overrides)
        self._options = base.with_overrides(extra) if extra else base

        self.normalizer = QueryNormalizer(self._options)
        self.matcher = FuzzyMatcher(self._options.flexibility)

    @property
    def options(self) -> SearchOptions:
        """Options this engine was built with."""
        return self._options

    def search(self, query: str, source: Any, limit: int = 1) -> Optional[List[str]]:
        """
        Search a candidate collection.

        Args:
            query: Search query
            source: OrderedCandidates, KeyedCandidates, a list of strings or
                a mapping with string values
            limit: Maximum number of results to return

        Returns:
            Matching candidates ordered by edit distance, or None if nothing matched
        """
        return self.search_detailed(query, source, limit).matched_values()

    def search_detailed(self, query: str, source: Any, limit: int = 1) -> SearchResponse:
        """
        Search a candidate collection and report per-result details.

        Args:
            query: Search query
            source: OrderedCandidates, KeyedCandidates, a list of strings or
                a mapping with string values
            limit: Maximum number of results to return; below 1 nothing is returned

        Returns:
            SearchResponse with ranked results and metadata
        """
        start_time = time.time()

        if limit < 1:
            logger.debug("search_skipped", reason="non_positive_limit", limit=limit)
            return self._create_empty_response(query, start_time)

        if not query:
            logger.debug("search_skipped", reason="empty_query")
            return self._create_empty_response(query, start_time)

        candidates = as_candidates(source)
        if candidates is None:
            logger.warning("unsupported_source_shape", source_type=type(source).__name__)
            return self._create_empty_response(query, start_time)

        normalized = self.normalizer.normalize(query, candidates)
        if not normalized.query:
            logger.debug("search_skipped", reason="empty_normalized_query", query=query)
            return self._create_empty_response(query, start_time)

        matches = self.matcher.match(normalized.query, normalized.tokens, normalized.candidates)
        ranked = rank(deduplicate(matches), normalized.query)

        execution_time = (time.time() - start_time) * 1000
        logger.debug(
            "search_completed",
            query=query,
            normalized_query=normalized.query,
            candidates=len(normalized.candidates),
            raw_matches=len(matches),
            total_matches=len(ranked),
            execution_time_ms=round(execution_time, 3)
        )

        return SearchResponse(
            query=query,
            normalized_query=normalized.query,
            tokens=normalized.tokens,
            total_matches=len(ranked),
            results=ranked[:limit],
            execution_time_ms=execution_time
        )

    def tokenize(self, text: str, delimiter: str = " ") -> List[str]:
        """Split text into tokens on a delimiter."""
        return tokenize(text, delimiter)

    def _create_empty_response(self, query: Optional[str], start_time: float) -> SearchResponse:
        """Create an empty response for searches that cannot match."""
        execution_time = (time.time() - start_time) * 1000

        return SearchResponse(
            query=query or "",
            execution_time_ms=execution_time
        )
