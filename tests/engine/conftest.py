"""Shared fixtures for engine tests."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from engine.records import KeywordRecord
from shared.types import Competition, SearchType


def build_record(index: int, **fields: Any) -> KeywordRecord:
    values: dict[str, Any] = {
        "id": f"t-kw-{index}",
        "name": f"Test keyword {index}",
        "search_volume": 1000 + index,
        "product_count": 100,
        "competition_level": Competition.medium,
        "trend": tuple(range(12)),
        "is_brand": False,
        "search_type": SearchType.shopping,
    }
    values.update(fields)
    return KeywordRecord(**values)


@pytest.fixture
def make_record():
    """Factory building a valid KeywordRecord with overridable fields."""
    return build_record


class StaticSource:
    """Keyword source returning prepared batches, optionally gated by events."""

    def __init__(self, batches: dict[str, list[KeywordRecord]] | None = None) -> None:
        self.batches = batches or {}
        self.gates: dict[str, asyncio.Event] = {}
        self.failures: dict[str, Exception] = {}
        self.calls: list[tuple[str, str]] = []

    async def fetch(self, category_id: str, category_name: str) -> list[KeywordRecord]:
        self.calls.append((category_id, category_name))
        if category_id in self.gates:
            await self.gates[category_id].wait()
        if category_id in self.failures:
            raise self.failures[category_id]
        return list(self.batches.get(category_id, []))


@pytest.fixture
def static_source():
    return StaticSource()
