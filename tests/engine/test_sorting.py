"""Tests for the sort engine and sort spec toggling."""

import pytest

from engine.sorting import DEFAULT_SORT, SortSpec, sort_records
from shared.types import Competition, SearchType, SortDirection, SortKey


@pytest.fixture
def records(make_record):
    # Volumes repeat so ties exist in both directions
    volumes = [500, 300, 500, 100, 300, 500, 100]
    return [
        make_record(
            i,
            search_volume=v,
            competition_level=[Competition.low, Competition.high, Competition.medium][i % 3],
            search_type=SearchType.shopping if i % 2 else SearchType.informational,
            is_brand=i % 3 == 0,
        )
        for i, v in enumerate(volumes)
    ]


class TestSortSpec:
    def test_default_is_volume_descending(self) -> None:
        assert DEFAULT_SORT == SortSpec(SortKey.search_volume, SortDirection.desc)

    def test_same_key_flips_direction(self) -> None:
        assert DEFAULT_SORT.toggle(SortKey.search_volume).direction == SortDirection.asc

    def test_toggle_twice_is_identity(self) -> None:
        spec = SortSpec(SortKey.name, SortDirection.asc)
        assert spec.toggle(SortKey.name).toggle(SortKey.name) == spec

    def test_new_key_starts_descending(self) -> None:
        spec = SortSpec(SortKey.name, SortDirection.asc).toggle(SortKey.product_count)
        assert spec == SortSpec(SortKey.product_count, SortDirection.desc)

    def test_accepts_column_id(self) -> None:
        assert DEFAULT_SORT.toggle("productCount").key is SortKey.product_count

    def test_trend_is_not_sortable(self) -> None:
        with pytest.raises(ValueError):
            DEFAULT_SORT.toggle("trend")


class TestSortRecords:
    @pytest.mark.parametrize("key", list(SortKey))
    @pytest.mark.parametrize("direction", list(SortDirection))
    def test_permutation_and_idempotent(self, records, key, direction) -> None:
        spec = SortSpec(key, direction)
        once = sort_records(records, spec)
        assert sorted(r.id for r in once) == sorted(r.id for r in records)
        assert sort_records(once, spec) == once

    def test_ascending_numeric(self, records) -> None:
        result = sort_records(records, SortSpec(SortKey.search_volume, SortDirection.asc))
        assert [r.search_volume for r in result] == [100, 100, 300, 300, 500, 500, 500]

    def test_stable_ties_descending(self, records) -> None:
        result = sort_records(records, SortSpec(SortKey.search_volume, SortDirection.desc))
        assert [r.id for r in result] == [
            "t-kw-0", "t-kw-2", "t-kw-5",
            "t-kw-1", "t-kw-4",
            "t-kw-3", "t-kw-6",
        ]

    def test_stable_ties_ascending(self, records) -> None:
        result = sort_records(records, SortSpec(SortKey.search_volume, SortDirection.asc))
        assert [r.id for r in result] == [
            "t-kw-3", "t-kw-6",
            "t-kw-1", "t-kw-4",
            "t-kw-0", "t-kw-2", "t-kw-5",
        ]

    def test_enum_compared_by_value(self, records) -> None:
        result = sort_records(records, SortSpec(SortKey.competition_level, SortDirection.asc))
        values = [r.competition_level.value for r in result]
        assert values == sorted(values)
        assert values[0] == "High"

    def test_bool_descending_puts_brands_first(self, records) -> None:
        result = sort_records(records, SortSpec(SortKey.is_brand, SortDirection.desc))
        brands = [r.is_brand for r in result]
        assert brands == sorted(brands, reverse=True)
        assert brands[0] is True

    def test_does_not_mutate_input(self, records) -> None:
        snapshot = list(records)
        sort_records(records, SortSpec(SortKey.name, SortDirection.asc))
        assert records == snapshot
