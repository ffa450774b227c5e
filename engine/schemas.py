"""Pydantic schemas for keyword payloads served by a keyword backend.

The backend speaks camelCase JSON; fields are aliased so both the wire
names and the Python names are accepted.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from shared.types import Competition, SearchType

from .records import TREND_LENGTH, KeywordRecord


class KeywordPayload(BaseModel):
    """One keyword object as returned by GET /keywords."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    search_volume: int = Field(ge=0, alias="searchVolume")
    product_count: int = Field(ge=0, alias="productCount")
    competition_level: Competition = Field(alias="competitionLevel")
    trend_data: list[Annotated[float, Field(ge=0)]] = Field(
        alias="trendData", min_length=TREND_LENGTH, max_length=TREND_LENGTH
    )
    is_brand: bool = Field(alias="isBrand")
    search_type: SearchType = Field(alias="searchType")

    def to_record(self) -> KeywordRecord:
        return KeywordRecord(
            id=self.id,
            name=self.name,
            search_volume=self.search_volume,
            product_count=self.product_count,
            competition_level=self.competition_level,
            trend=tuple(self.trend_data),
            is_brand=self.is_brand,
            search_type=self.search_type,
        )


KeywordBatch = TypeAdapter(list[KeywordPayload])
