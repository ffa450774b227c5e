"""Dataset store: the full, unfiltered keyword batch of the selected category."""

from __future__ import annotations

import logging

from shared.types import LoadState

from .categories import CategoryTree
from .records import KeywordRecord
from .sources import KeywordSource

logger = logging.getLogger(__name__)


class DatasetStore:
    """Holds the current keyword batch and performs versioned loads.

    Each load is stamped with an increasing version. When a load finishes
    after a newer one has started, its result is discarded (last write
    wins), so a stale response can never overwrite a newer dataset. The
    dataset is swapped in a single assignment, so consumers never observe
    a partially loaded batch.

    `records` is None until the first successful load; an empty list means
    the category was loaded and has no keywords.
    """

    def __init__(self, tree: CategoryTree, source: KeywordSource) -> None:
        self._tree = tree
        self._source = source
        self._records: list[KeywordRecord] | None = None
        self._category_id: str | None = None
        self._state = LoadState.idle
        self._error: str | None = None
        self._version = 0

    @property
    def records(self) -> list[KeywordRecord] | None:
        return self._records

    @property
    def category_id(self) -> str | None:
        """Category of the dataset currently held."""
        return self._category_id

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def error(self) -> str | None:
        """Message of the last failed load, None otherwise."""
        return self._error

    @property
    def source(self) -> KeywordSource:
        return self._source

    @property
    def version(self) -> int:
        return self._version

    async def load(self, category_id: str) -> bool:
        """Load the batch for `category_id` and make it current.

        The category name is resolved from the tree (an unknown id yields
        an empty name, not an error). The batch is stored sorted by search
        volume, highest first.

        Returns:
            True if this load replaced the dataset, False if it failed or
            was superseded by a newer load.
        """
        self._version += 1
        version = self._version
        self._state = LoadState.loading
        self._error = None

        category_name = self._tree.find_name(category_id)
        logger.debug("Loading keywords for %s (%r), version %d", category_id, category_name, version)

        try:
            batch = await self._source.fetch(category_id, category_name)
        except Exception as e:
            if version != self._version:
                logger.debug("Discarding failed stale load %d for %s", version, category_id)
                return False
            logger.warning("Keyword load failed for %s: %s", category_id, e)
            self._state = LoadState.failed
            self._error = f"{type(e).__name__}: {e!s}"
            return False

        if version != self._version:
            logger.debug("Discarding stale load %d for %s", version, category_id)
            return False

        self._records = sorted(batch, key=lambda r: r.search_volume, reverse=True)
        self._category_id = category_id
        self._state = LoadState.loaded
        logger.debug("Loaded %d keywords for %s", len(self._records), category_id)
        return True
