"""Query normalization and tokenization."""

from typing import FrozenSet, List, NamedTuple

from ..models.candidates import Candidate, Candidates
from ..models.options import SearchOptions

STOP_WORDS: FrozenSet[str] = frozenset({"the", "a", "to", "on", "in", "is", "and"})


def tokenize(text: str, delimiter: str = " ") -> List[str]:
    """
    Split text into tokens on a delimiter.

    Empty tokens produced by consecutive delimiters are kept and nothing is
    trimmed. An empty delimiter splits the text into single characters.

    Args:
        text: Input text
        delimiter: Token separator

    Returns:
        List of tokens
    """
    if delimiter == "":
        return list(text)
    return text.split(delimiter)


def remove_stop_words(query: str) -> str:
    """Drop stop words (case-insensitive) from a space separated query."""
    return " ".join(word for word in query.split(" ") if word.lower() not in STOP_WORDS)


def stem_tokens(tokens: List[str]) -> List[str]:
    """Strip a single trailing 's' from every token."""
    return [token[:-1] if token.endswith("s") else token for token in tokens]


class NormalizedQuery(NamedTuple):
    """Query and candidates prepared for matching."""

    query: str
    tokens: List[str]
    candidates: List[Candidate]


class QueryNormalizer:
    """Applies the configured normalization steps to a query and its candidates."""

    def __init__(self, options: SearchOptions) -> None:
        """
        Initialize the normalizer.

        Args:
            options: Search options controlling each normalization step
        """
        self.options = options

    def normalize_query(self, query: str) -> str:
        """
        Normalize a query string.

        Steps run in order: stop-word removal, exclusion stripping, case
        handling with trimming, then stemming.

        Args:
            query: Raw query

        Returns:
            Normalized query
        """
        options = self.options

        if options.ignore_stop_words:
            query = remove_stop_words(query)

        if options.exclusions is not None:
            query = options.exclusions.sub("", query)

        if options.case_sensitive:
            query = query.strip()
        else:
            query = query.strip().lower()

        if options.stemming:
            query = " ".join(stem_tokens(tokenize(query)))

        return query

    def fold(self, text: str) -> str:
        """Return the comparison form of a candidate string."""
        if self.options.case_sensitive:
            return text
        return text.lower()

    def fold_candidates(self, candidates: Candidates) -> List[Candidate]:
        """Build folded copies of the candidates; the source is left untouched."""
        return [
            Candidate(value=value, folded=self.fold(value), index=index, key=key)
            for index, key, value in candidates.entries()
        ]

    def normalize(self, query: str, candidates: Candidates) -> NormalizedQuery:
        """Normalize a query and fold its candidates."""
        normalized = self.normalize_query(query)
        return NormalizedQuery(
            query=normalized,
            tokens=tokenize(normalized),
            candidates=self.fold_candidates(candidates),
        )
