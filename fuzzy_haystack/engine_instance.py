"""Shared search engine built from environment settings."""

from functools import lru_cache
from typing import Any, List, Optional

from .config import get_settings
from .core.engine import Haystack


@lru_cache()
def get_engine() -> Haystack:
    """Get the cached engine configured from settings."""
    return Haystack(get_settings().search_options())


def search(query: str, source: Any, limit: Optional[int] = None) -> Optional[List[str]]:
    """Search with the shared engine; ``limit`` defaults to the ``default_limit`` setting."""
    if limit is None:
        limit = get_settings().default_limit
    return get_engine().search(query, source, limit)
