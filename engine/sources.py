"""Keyword sources: where a category's keyword batch comes from.

A source is any object with an async `fetch(category_id, category_name)`
returning keyword records. Two are provided:

- SyntheticKeywordSource: random but plausible data, used when no backend
  is configured
- HttpKeywordSource: GET /keywords on a keyword backend via httpx
"""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Any, Protocol

import httpx

from shared.types import Competition, SearchType

from .config import EngineConfig
from .records import TREND_LENGTH, KeywordRecord
from .schemas import KeywordBatch

logger = logging.getLogger(__name__)


class KeywordSourceError(Exception):
    """A keyword source could not produce a batch."""


class KeywordSource(Protocol):
    async def fetch(self, category_id: str, category_name: str) -> list[KeywordRecord]: ...


class SyntheticKeywordSource:
    """Generates a fixed-size batch of random keyword records.

    Distribution:
    - search volume 1,000..50,999, product count 100..10,099
    - 30% brand keywords, shopping/informational split 50/50
    - competition roughly a third low, the rest split medium/high
    - trend values 0..99 for each of the trailing 12 months
    """

    def __init__(
        self,
        batch_size: int = 500,
        delay: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        self._batch_size = batch_size
        self._delay = delay
        self._rng = rng or random.Random()

    @classmethod
    def from_config(cls, config: EngineConfig, rng: random.Random | None = None) -> SyntheticKeywordSource:
        return cls(batch_size=config.batch_size, delay=config.load_delay, rng=rng)

    async def fetch(self, category_id: str, category_name: str) -> list[KeywordRecord]:
        await asyncio.sleep(self._delay)
        return [self._make_record(category_id, category_name, i) for i in range(1, self._batch_size + 1)]

    def _make_record(self, category_id: str, category_name: str, index: int) -> KeywordRecord:
        rng = self._rng
        is_brand = rng.random() > 0.7
        label = f"{category_name} brand keyword {index}" if is_brand else f"{category_name} keyword {index}"

        if rng.random() < 0.33:
            competition = Competition.low
        elif rng.random() < 0.66:
            competition = Competition.medium
        else:
            competition = Competition.high

        return KeywordRecord(
            id=f"{category_id}-kw-{index}",
            name=label.strip(),
            search_volume=rng.randrange(50000) + 1000,
            product_count=rng.randrange(10000) + 100,
            competition_level=competition,
            trend=tuple(rng.randrange(100) for _ in range(TREND_LENGTH)),
            is_brand=is_brand,
            search_type=SearchType.shopping if rng.random() > 0.5 else SearchType.informational,
        )


def _extract_items(body: Any) -> Any:
    """Accept a bare array or an envelope such as {"keywords": [...]}."""
    if isinstance(body, dict):
        for key in ("keywords", "items", "results", "data"):
            if key in body and isinstance(body[key], list):
                return body[key]
    return body


class HttpKeywordSource:
    """Fetches keyword batches from a keyword backend.

    The backend answers GET /keywords?category=<id> with a JSON array of
    keyword objects. Any transport, HTTP or validation failure is raised
    as KeywordSourceError; retries are left to the caller.
    """

    def __init__(
        self,
        config: EngineConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not config.source_url:
            raise ValueError("HttpKeywordSource requires config.source_url")
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.source_url,
            headers=self._get_headers(),
            timeout=config.http_timeout,
            transport=transport,
        )

    async def fetch(self, category_id: str, category_name: str) -> list[KeywordRecord]:
        try:
            response = await self._client.get("/keywords", params={"category": category_id})
            response.raise_for_status()
            payloads = KeywordBatch.validate_python(_extract_items(response.json()))
        except httpx.RequestError as e:
            logger.warning("Network error fetching keywords for %s: %s", category_id, e)
            raise KeywordSourceError(f"Network error: {e}") from e
        except httpx.HTTPStatusError as e:
            logger.warning(
                "HTTP %d error fetching keywords for %s", e.response.status_code, category_id
            )
            raise KeywordSourceError(f"HTTP {e.response.status_code} from keyword backend") from e
        except ValueError as e:  # pydantic ValidationError, malformed JSON
            logger.warning("Invalid keyword payload for %s: %s", category_id, e)
            raise KeywordSourceError(f"Invalid keyword payload: {e}") from e

        logger.debug("Fetched %d keywords for %s (%s)", len(payloads), category_id, category_name)
        return [p.to_record() for p in payloads]

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HttpKeywordSource:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def _get_headers(self) -> dict[str, str]:
        """Build HTTP headers including auth if configured."""
        headers = {"Accept": "application/json"}
        if self._config.api_key:
            headers["Authorization"] = f"Bearer {self._config.api_key}"
        return headers


def create_source(config: EngineConfig) -> KeywordSource:
    """HTTP source when a backend URL is configured, synthetic otherwise."""
    if config.source_url:
        return HttpKeywordSource(config)
    return SyntheticKeywordSource.from_config(config)
