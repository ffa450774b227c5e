"""Sort engine: single-key stable ordering of keyword records."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from shared.types import SortDirection, SortKey

from .records import KeywordRecord


@dataclass(frozen=True)
class SortSpec:
    """Active sort key and direction."""

    key: SortKey = SortKey.search_volume
    direction: SortDirection = SortDirection.desc

    def toggle(self, key: SortKey | str) -> SortSpec:
        """Return the spec after the user clicks the `key` column.

        Clicking the active column flips the direction; any other column
        starts descending.
        """
        key = SortKey(key)
        if key == self.key:
            flipped = SortDirection.asc if self.direction == SortDirection.desc else SortDirection.desc
            return SortSpec(key, flipped)
        return SortSpec(key, SortDirection.desc)


DEFAULT_SORT = SortSpec()


def sort_records(records: Sequence[KeywordRecord], spec: SortSpec) -> list[KeywordRecord]:
    """Return records ordered by `spec`.

    `sorted` is stable in both directions: with reverse=True, records with
    equal keys still keep their input order.
    """
    return sorted(
        records,
        key=lambda r: r.sort_value(spec.key),
        reverse=spec.direction == SortDirection.desc,
    )
