"""Tests for inclusion sets with the "all" sentinel."""

from engine.inclusion import ALL, InclusionSet
from shared.types import Competition


class TestInclusionSet:
    def test_default_is_all(self) -> None:
        s = InclusionSet()
        assert s.is_all
        assert ALL in s
        assert list(s) == [ALL]

    def test_of_with_all_is_all(self) -> None:
        assert InclusionSet.of(Competition.low, ALL).is_all
        assert InclusionSet.of().is_all

    def test_selecting_value_removes_all(self) -> None:
        s = InclusionSet.all().toggle(Competition.low)
        assert not s.is_all
        assert ALL not in s
        assert Competition.low in s

    def test_selecting_all_clears_values(self) -> None:
        s = InclusionSet.of(Competition.low, Competition.high).toggle(ALL)
        assert s.is_all
        assert Competition.low not in s

    def test_toggle_removes_present_value(self) -> None:
        s = InclusionSet.of(Competition.low, Competition.high).toggle(Competition.low)
        assert set(s) == {Competition.high}

    def test_deselecting_last_value_reverts_to_all(self) -> None:
        s = InclusionSet.all().toggle(Competition.low).toggle(Competition.low)
        assert s.is_all

    def test_allows(self) -> None:
        s = InclusionSet.of(Competition.medium)
        assert s.allows(Competition.medium)
        assert not s.allows(Competition.low)
        assert InclusionSet.all().allows(Competition.low)

    def test_immutable_toggle(self) -> None:
        original = InclusionSet.all()
        original.toggle(Competition.low)
        assert original.is_all

    def test_equality(self) -> None:
        a = InclusionSet.of(Competition.low, Competition.high)
        b = InclusionSet.all().toggle(Competition.high).toggle(Competition.low)
        assert a == b
