"""Keyword table engine: filtering, sorting and infinite-scroll pagination
over a category's keyword dataset."""

from .categories import DEFAULT_TAXONOMY, Category, CategoryPath, CategoryTree
from .config import EngineConfig, load_config
from .criteria import VOLUME_PRESETS, FilterCriteria, VolumeFilter, VolumeMode, parse_bound
from .dataset import DatasetStore
from .filtering import build_predicates, filter_records
from .inclusion import ALL, InclusionSet
from .pagination import PaginationWindow
from .records import TREND_LENGTH, KeywordRecord
from .schemas import KeywordPayload
from .session import KeywordTableSession
from .sorting import DEFAULT_SORT, SortSpec, sort_records
from .sources import (
    HttpKeywordSource,
    KeywordSource,
    KeywordSourceError,
    SyntheticKeywordSource,
    create_source,
)

__all__ = [
    # Session
    "KeywordTableSession",
    # Configuration
    "EngineConfig",
    "load_config",
    # Categories
    "Category",
    "CategoryTree",
    "CategoryPath",
    "DEFAULT_TAXONOMY",
    # Records and sources
    "KeywordRecord",
    "KeywordPayload",
    "KeywordSource",
    "KeywordSourceError",
    "SyntheticKeywordSource",
    "HttpKeywordSource",
    "create_source",
    "DatasetStore",
    # Filtering
    "ALL",
    "InclusionSet",
    "FilterCriteria",
    "VolumeFilter",
    "VolumeMode",
    "parse_bound",
    "build_predicates",
    "filter_records",
    # Sorting
    "SortSpec",
    "sort_records",
    "DEFAULT_SORT",
    # Pagination
    "PaginationWindow",
    # Constants
    "TREND_LENGTH",
    "VOLUME_PRESETS",
]
