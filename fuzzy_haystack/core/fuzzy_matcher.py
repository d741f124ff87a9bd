"""Three-tier candidate matching: substring, scrambled tokens and edit distance."""

from typing import List, NamedTuple, Sequence

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from ..models.candidates import Candidate
from ..models.response import MatchTier


class Match(NamedTuple):
    """A candidate accepted by one matching tier."""

    candidate: Candidate
    tier: MatchTier


class FuzzyMatcher:
    """Runs every matching tier against a set of folded candidates."""

    def __init__(self, flexibility: int = 2) -> None:
        """
        Initialize the matcher.

        Args:
            flexibility: Maximum edit distance for fuzzy matches, 0 disables the fuzzy tier
        """
        self.flexibility = flexibility

    def match(
        self,
        query: str,
        tokens: Sequence[str],
        candidates: Sequence[Candidate]
    ) -> List[Match]:
        """
        Collect raw matches from all tiers.

        A candidate appears once for every tier that accepts it; results are
        grouped by tier in the order substring, tokens, fuzzy. Candidates at
        the same edit distance therefore rank in the order their first tier
        accepted them, not in source order.

        Args:
            query: Normalized query
            tokens: Tokens of the normalized query
            candidates: Folded candidates

        Returns:
            Unranked list of matches, possibly with duplicates
        """
        if not query or not candidates:
            return []

        matches = self.substring_matches(query, candidates)
        matches.extend(self.token_matches(tokens, candidates))

        if self.flexibility > 0:
            matches.extend(self.fuzzy_matches(query, candidates))

        return matches

    def substring_matches(self, query: str, candidates: Sequence[Candidate]) -> List[Match]:
        """Accept candidates containing the whole query."""
        return [
            Match(candidate, MatchTier.SUBSTRING)
            for candidate in candidates
            if query in candidate.folded
        ]

    def token_matches(self, tokens: Sequence[str], candidates: Sequence[Candidate]) -> List[Match]:
        """Accept candidates containing every token, in any order."""
        if not tokens:
            return []

        return [
            Match(candidate, MatchTier.TOKENS)
            for candidate in candidates
            if all(token in candidate.folded for token in tokens)
        ]

    def fuzzy_matches(self, query: str, candidates: Sequence[Candidate]) -> List[Match]:
        """
        Accept candidates within ``flexibility`` edits of the query.

        Query and candidates are compared lower-cased whatever the case
        option. Matches are ordered by edit distance, ties keeping source
        order. Empty candidates are never fuzzy matches.
        """
        choices = {
            position: candidate.value.lower()
            for position, candidate in enumerate(candidates)
            if candidate.value
        }
        if not choices:
            return []

        found = process.extract(
            query.lower(),
            choices,
            scorer=Levenshtein.distance,
            score_cutoff=self.flexibility,
            limit=None
        )
        found.sort(key=lambda item: (item[1], item[2]))

        return [Match(candidates[position], MatchTier.FUZZY) for _, _, position in found]
