"""Keyword record value type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from shared.types import Competition, SearchType, SortKey

TREND_LENGTH = 12

# SortKey -> KeywordRecord attribute
SORT_FIELDS: dict[SortKey, str] = {
    SortKey.name: "name",
    SortKey.search_volume: "search_volume",
    SortKey.product_count: "product_count",
    SortKey.competition_level: "competition_level",
    SortKey.is_brand: "is_brand",
    SortKey.search_type: "search_type",
}


@dataclass(frozen=True)
class KeywordRecord:
    """One row of the keyword table.

    Attributes:
        id: Unique identifier, e.g. "1-kw-12".
        name: Keyword text shown to the user.
        search_volume: Monthly search count.
        product_count: Number of products listed for the keyword.
        competition_level: Competition intensity.
        trend: Search interest for each of the trailing 12 months.
        is_brand: Whether the keyword contains a brand name.
        search_type: Search intent.
    """

    id: str
    name: str
    search_volume: int
    product_count: int
    competition_level: Competition
    trend: tuple[float, ...]
    is_brand: bool
    search_type: SearchType

    def __post_init__(self) -> None:
        # Coerce plain strings / lists coming from loaders
        object.__setattr__(self, "competition_level", Competition(self.competition_level))
        object.__setattr__(self, "search_type", SearchType(self.search_type))
        object.__setattr__(self, "trend", tuple(self.trend))

        if self.search_volume < 0:
            raise ValueError(f"search_volume must be >= 0, got {self.search_volume}")
        if self.product_count < 0:
            raise ValueError(f"product_count must be >= 0, got {self.product_count}")
        if len(self.trend) != TREND_LENGTH:
            raise ValueError(f"trend must have {TREND_LENGTH} values, got {len(self.trend)}")
        if any(v < 0 for v in self.trend):
            raise ValueError("trend values must be >= 0")

    def sort_value(self, key: SortKey) -> Any:
        """Raw comparable value of a sortable field.

        Enum fields compare by their string value.
        """
        value = getattr(self, SORT_FIELDS[key])
        return value.value if isinstance(value, Enum) else value
