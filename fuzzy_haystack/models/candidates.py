"""Candidate collections accepted by the search engine."""

from collections.abc import Mapping, Sequence
from typing import Any, Dict, Iterator, List, Literal, NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError


class Candidate(NamedTuple):
    """A single candidate string together with its comparison form."""

    value: str
    folded: str
    index: int
    key: Any = None


class OrderedCandidates(BaseModel):
    """Candidates given as an ordered sequence of strings."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["ordered"] = "ordered"
    items: List[StrictStr] = Field(default_factory=list, description="Candidate strings")

    def entries(self) -> Iterator[Tuple[int, Any, str]]:
        """Yield ``(index, key, value)`` for every candidate; keys are None."""
        for index, value in enumerate(self.items):
            yield index, None, value

    def __len__(self) -> int:
        return len(self.items)


class KeyedCandidates(BaseModel):
    """Candidates given as a mapping from arbitrary keys to strings."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["keyed"] = "keyed"
    mapping: Dict[Any, StrictStr] = Field(default_factory=dict, description="Key to candidate string")

    def entries(self) -> Iterator[Tuple[int, Any, str]]:
        """Yield ``(position, key, value)`` in mapping order."""
        for index, (key, value) in enumerate(self.mapping.items()):
            yield index, key, value

    def __len__(self) -> int:
        return len(self.mapping)


Candidates = Union[OrderedCandidates, KeyedCandidates]


def as_candidates(source: Any) -> Optional[Candidates]:
    """
    Resolve a caller-supplied source into a candidate variant.

    Args:
        source: OrderedCandidates, KeyedCandidates, a sequence of strings
            or a mapping with string values

    Returns:
        Candidate variant, or None when the shape is not supported
    """
    if isinstance(source, (OrderedCandidates, KeyedCandidates)):
        return source

    try:
        if isinstance(source, Mapping):
            return KeyedCandidates(mapping=dict(source))
        if isinstance(source, Sequence) and not isinstance(source, (str, bytes, bytearray)):
            return OrderedCandidates(items=list(source))
    except ValidationError:
        return None

    return None
