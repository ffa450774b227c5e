"""Multi-select filter values with an "all" sentinel.

An inclusion set is either {"all"} (no constraint) or a non-empty set
of specific values. The two never mix.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

ALL = "all"

T = TypeVar("T")


@dataclass(frozen=True)
class InclusionSet(Generic[T]):
    """Immutable inclusion set. Build with `InclusionSet.all()` or `InclusionSet.of(...)`."""

    values: frozenset[T] = frozenset()

    @classmethod
    def all(cls) -> InclusionSet[T]:
        return cls(frozenset())

    @classmethod
    def of(cls, *values: T) -> InclusionSet[T]:
        """Set of specific values; `ALL` anywhere, or no values, gives the "all" set."""
        if not values or ALL in values:
            return cls.all()
        return cls(frozenset(values))

    @property
    def is_all(self) -> bool:
        return not self.values

    def toggle(self, value: T | str) -> InclusionSet[T]:
        """Return the set after the user clicks `value`.

        - "all" clears every specific selection
        - a specific value is removed when present, added otherwise
          (which drops "all")
        - removing the last specific value reverts to "all"
        """
        if value == ALL:
            return InclusionSet.all()
        if value in self.values:
            return InclusionSet(self.values - {value})
        return InclusionSet(self.values | {value})

    def allows(self, value: T) -> bool:
        return self.is_all or value in self.values

    def __contains__(self, value: object) -> bool:
        if value == ALL:
            return self.is_all
        return value in self.values

    def __iter__(self) -> Iterator[T | str]:
        if self.is_all:
            return iter((ALL,))
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values) or 1
