"""Identifier pattern protocol contract."""

from typing import Pattern, Protocol, runtime_checkable


@runtime_checkable
class PatternBuilder(Protocol):
    """Protocol for building identifier matching patterns."""

    def case_insensitive_exact(self, value: str) -> Pattern[str]:
        """Build a pattern matching exactly value, ignoring case."""
        ...
