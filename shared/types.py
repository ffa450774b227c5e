"""Shared type definitions for the keyword table engine.

These enums inherit from both `str` and `Enum` so their values are the
plain strings served by the keyword backend, and so `json.dumps` works
on them without custom encoders.
"""

from enum import Enum


class Competition(str, Enum):
    """Competition intensity of a keyword."""

    low = "Low"
    medium = "Medium"
    high = "High"


class SearchType(str, Enum):
    """Search intent classification.

    - shopping: the searcher intends to buy
    - informational: the searcher is looking for information
    """

    shopping = "Shopping"
    informational = "Informational"


class BrandOption(str, Enum):
    """Selectable values of the brand filter."""

    brand = "brand"
    non_brand = "non-brand"


class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"


class SortKey(str, Enum):
    """Keyword fields the table can be sorted by.

    Values are the column ids used by the presentation layer. The trend
    series is deliberately absent: it has no ordering.
    """

    name = "name"
    search_volume = "searchVolume"
    product_count = "productCount"
    competition_level = "competitionLevel"
    is_brand = "isBrand"
    search_type = "searchType"


class LoadState(str, Enum):
    """State of the dataset store.

    Lifecycle: idle -> loading -> loaded | failed
    """

    idle = "idle"
    loading = "loading"
    loaded = "loaded"
    failed = "failed"
