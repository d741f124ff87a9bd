"""Search option model shared by every engine component."""

import re
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class SearchOptions(BaseModel):
    """
    Immutable option set for a search engine.

    Fields accept both snake_case names and their camelCase aliases
    (``caseSensitive``, ``ignoreStopWords``).
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="forbid",
    )

    case_sensitive: bool = Field(
        default=False, description="Compare query and candidates without lower-casing"
    )
    flexibility: int = Field(
        default=2, ge=0, description="Maximum edit distance for fuzzy matches (0 disables them)"
    )
    stemming: bool = Field(
        default=False, description="Strip one trailing 's' from every query token"
    )
    exclusions: Optional[re.Pattern] = Field(
        default=None, description="Pattern removed from the query before matching"
    )
    ignore_stop_words: bool = Field(
        default=False, description="Drop common stop words from the query"
    )

    @field_validator("exclusions", mode="before")
    @classmethod
    def compile_exclusions(cls, v: Any) -> Optional[re.Pattern]:
        """
        Compile exclusions into a single pattern.

        A compiled pattern is used as is. Plain strings, or sequences of
        them, are treated as literal substrings.
        """
        if v is None or isinstance(v, re.Pattern):
            return v

        if isinstance(v, str):
            parts = [v]
        elif isinstance(v, (list, tuple, set, frozenset)):
            parts = list(v)
        else:
            raise ValueError("Exclusions must be a pattern, a string or a list of strings")

        for part in parts:
            if not isinstance(part, str):
                raise ValueError("Exclusion entries must be strings")

        parts = [part for part in parts if part]
        if not parts:
            return None

        # Longest first so overlapping literals are removed whole
        parts.sort(key=len, reverse=True)
        return re.compile("|".join(re.escape(part) for part in parts))

    def with_overrides(self, overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "SearchOptions":
        """
        Return a new option set with the given fields replaced.

        Args:
            overrides: Mapping of option names (snake_case or camelCase)
            **kwargs: Additional option overrides

        Returns:
            Validated SearchOptions instance
        """
        values = {name: getattr(self, name) for name in type(self).model_fields}
        merged = dict(overrides or {})
        merged.update(kwargs)

        aliases = {field.alias: name for name, field in type(self).model_fields.items()}
        for key, value in merged.items():
            values[aliases.get(key, key)] = value

        return type(self).model_validate(values)
