"""Filter engine: the subset of the dataset matching the active criteria."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from shared.types import BrandOption

from .criteria import FilterCriteria
from .records import KeywordRecord

Predicate = Callable[[KeywordRecord], bool]


def build_predicates(criteria: FilterCriteria) -> list[Predicate]:
    """One predicate per constraining dimension; unconstrained dimensions add none."""
    predicates: list[Predicate] = []

    term = criteria.normalized_term
    if term:
        predicates.append(lambda r: term in r.name.lower())

    volume = criteria.volume
    if volume.is_active:
        predicates.append(lambda r: volume.matches(r.search_volume))

    brand = criteria.brand
    if not brand.is_all:
        include_brand = BrandOption.brand in brand
        include_non_brand = BrandOption.non_brand in brand
        # Both selected is the same as "all"
        if include_brand and not include_non_brand:
            predicates.append(lambda r: r.is_brand)
        elif include_non_brand and not include_brand:
            predicates.append(lambda r: not r.is_brand)

    search_type = criteria.search_type
    if not search_type.is_all:
        predicates.append(lambda r: r.search_type in search_type)

    competition = criteria.competition
    if not competition.is_all:
        predicates.append(lambda r: r.competition_level in competition)

    return predicates


def filter_records(
    records: Sequence[KeywordRecord],
    criteria: FilterCriteria,
) -> list[KeywordRecord]:
    """Keep records satisfying every active predicate, in input order.

    Args:
        records: Full dataset.
        criteria: Active filter set.

    Returns:
        New list; records are neither copied nor mutated.
    """
    predicates = build_predicates(criteria)
    if not predicates:
        return list(records)
    return [r for r in records if all(p(r) for p in predicates)]
