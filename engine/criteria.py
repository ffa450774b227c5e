"""Filter criteria: the active query over the keyword dataset.

`FilterCriteria` is an immutable value. Every user change produces a new
instance; the derived view is recomputed from (dataset, criteria, sort).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from shared.types import BrandOption, Competition, SearchType

from .inclusion import ALL, InclusionSet

# Thresholds offered as one-click volume filters
VOLUME_PRESETS = (5000, 10000, 20000, 50000)


class VolumeMode(str, Enum):
    off = "off"
    preset = "preset"
    custom = "custom"


def parse_bound(text: str | int | None) -> int | None:
    """Parse a min/max text field.

    Empty or non-numeric input means the bound is not set; it is never an
    error. Thousands separators are accepted ("10,000").
    """
    if text is None:
        return None
    if isinstance(text, int):
        return text
    cleaned = text.strip().replace(",", "")
    if not cleaned:
        return None
    try:
        return int(cleaned)
    except ValueError:
        return None


@dataclass(frozen=True)
class VolumeFilter:
    """Search-volume constraint.

    Either off, a preset lower threshold, or a custom range whose bounds
    may each be unset.
    """

    mode: VolumeMode = VolumeMode.off
    threshold: int | None = None
    min_volume: int | None = None
    max_volume: int | None = None

    @classmethod
    def off(cls) -> VolumeFilter:
        return cls()

    @classmethod
    def preset(cls, threshold: int) -> VolumeFilter:
        return cls(mode=VolumeMode.preset, threshold=threshold)

    @classmethod
    def custom(
        cls,
        min_volume: str | int | None = None,
        max_volume: str | int | None = None,
    ) -> VolumeFilter:
        return cls(
            mode=VolumeMode.custom,
            min_volume=parse_bound(min_volume),
            max_volume=parse_bound(max_volume),
        )

    @property
    def is_active(self) -> bool:
        return self.mode is not VolumeMode.off

    def matches(self, volume: int) -> bool:
        if self.mode is VolumeMode.preset and self.threshold is not None:
            return volume >= self.threshold
        if self.mode is VolumeMode.custom:
            if self.min_volume is not None and volume < self.min_volume:
                return False
            if self.max_volume is not None and volume > self.max_volume:
                return False
        return True


@dataclass(frozen=True)
class FilterCriteria:
    """The complete active filter set. All dimensions combine with AND."""

    search_term: str = ""
    volume: VolumeFilter = field(default_factory=VolumeFilter)
    brand: InclusionSet[BrandOption] = field(default_factory=InclusionSet.all)
    search_type: InclusionSet[SearchType] = field(default_factory=InclusionSet.all)
    competition: InclusionSet[Competition] = field(default_factory=InclusionSet.all)

    @property
    def normalized_term(self) -> str:
        return self.search_term.strip().lower()

    @property
    def is_active(self) -> bool:
        """True when any dimension constrains the dataset."""
        return bool(
            self.normalized_term
            or self.volume.is_active
            or not self.brand.is_all
            or not self.search_type.is_all
            or not self.competition.is_all
        )

    def with_search_term(self, term: str) -> FilterCriteria:
        return replace(self, search_term=term)

    def with_volume(self, volume: VolumeFilter) -> FilterCriteria:
        return replace(self, volume=volume)

    def toggle_brand(self, value: BrandOption | str) -> FilterCriteria:
        return replace(self, brand=self.brand.toggle(_coerce(BrandOption, value)))

    def toggle_search_type(self, value: SearchType | str) -> FilterCriteria:
        return replace(self, search_type=self.search_type.toggle(_coerce(SearchType, value)))

    def toggle_competition(self, value: Competition | str) -> FilterCriteria:
        return replace(self, competition=self.competition.toggle(_coerce(Competition, value)))


def _coerce(enum_type: type[Enum], value: Enum | str) -> Enum | str:
    """Convert a raw option string to its enum member, passing "all" through."""
    if isinstance(value, enum_type) or value == ALL:
        return value
    return enum_type(value)
