"""Shared types and utilities for the keyword table engine."""

from .types import BrandOption, Competition, LoadState, SearchType, SortDirection, SortKey

__all__ = [
    "Competition",
    "SearchType",
    "BrandOption",
    "SortKey",
    "SortDirection",
    "LoadState",
]
