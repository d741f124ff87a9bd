"""Result models returned by detailed searches."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class MatchTier(str, Enum):
    """Matching strategy that accepted a candidate."""

    SUBSTRING = "substring"
    TOKENS = "tokens"
    FUZZY = "fuzzy"


class SearchResult(BaseModel):
    """Individual search result."""

    value: str = Field(..., description="The matched candidate, as supplied by the caller")
    index: int = Field(..., ge=0, description="Position of the candidate in the source")
    key: Optional[Any] = Field(None, description="Mapping key for keyed sources")
    edit_distance: int = Field(..., ge=0, description="Edit distance to the normalized query")
    tiers: List[MatchTier] = Field(..., description="Matching tiers that accepted the candidate")


class SearchResponse(BaseModel):
    """Response for a detailed search."""

    query: str = Field(..., description="Original search query")
    normalized_query: str = Field("", description="Query after normalization")
    tokens: List[str] = Field(default_factory=list, description="Query tokens used for matching")
    total_matches: int = Field(0, ge=0, description="Unique matches before the limit was applied")
    results: List[SearchResult] = Field(default_factory=list, description="Ranked, limited results")
    execution_time_ms: float = Field(0.0, description="Search execution time in milliseconds")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Response timestamp"
    )

    def matched_values(self) -> Optional[List[str]]:
        """Return the result values, or None when nothing matched."""
        if not self.results:
            return None
        return [result.value for result in self.results]
