"""Keyword table session: dataset -> filter -> sort -> paginate.

The session owns the dataset, the active criteria, the sort spec and the
pagination window. After any upstream change the whole pipeline is
re-run in that order, and the window goes back to its initial size.
"""

from __future__ import annotations

import asyncio
import logging

from shared.types import BrandOption, Competition, LoadState, SearchType, SortKey

from .categories import CategoryPath, CategoryTree
from .config import EngineConfig
from .criteria import FilterCriteria, VolumeFilter
from .dataset import DatasetStore
from .filtering import filter_records
from .pagination import PaginationWindow
from .records import KeywordRecord
from .sorting import DEFAULT_SORT, SortSpec, sort_records
from .sources import KeywordSource, create_source

logger = logging.getLogger(__name__)


class KeywordTableSession:
    """State and operations behind one keyword table.

    Single-threaded and cooperative: all mutation happens on the event
    loop, so no locking is needed. The only re-entrancy guard is the
    "loading more" flag, which makes overlapping `load_more()` calls
    coalesce into one.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        tree: CategoryTree | None = None,
        source: KeywordSource | None = None,
    ) -> None:
        self._config = config or EngineConfig()
        if tree is None:
            tree = (
                CategoryTree.from_yaml(self._config.taxonomy_file)
                if self._config.taxonomy_file
                else CategoryTree.default()
            )
        self._tree = tree
        self._store = DatasetStore(tree, source or create_source(self._config))
        self._path = CategoryPath(tree)

        self._criteria = FilterCriteria()
        self._sort = DEFAULT_SORT
        self._window = PaginationWindow(self._config.page_size, self._config.page_increment)
        self._view: list[KeywordRecord] | None = None
        self._loading_more = False
        self._generation = 0

    # ------------------------------------------------------------------
    # Outputs
    # ------------------------------------------------------------------

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def tree(self) -> CategoryTree:
        return self._tree

    @property
    def path(self) -> CategoryPath:
        return self._path

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def sort_spec(self) -> SortSpec:
        return self._sort

    @property
    def window(self) -> PaginationWindow:
        return self._window

    @property
    def dataset(self) -> list[KeywordRecord] | None:
        return self._store.records

    @property
    def dataset_category_id(self) -> str | None:
        """Category the current dataset was loaded for."""
        return self._store.category_id

    @property
    def view(self) -> list[KeywordRecord] | None:
        """Filtered and sorted records; None until a dataset has loaded."""
        return self._view

    @property
    def visible_records(self) -> list[KeywordRecord]:
        if self._view is None:
            return []
        return self._window.visible_slice(self._view)

    @property
    def total_available(self) -> int:
        return self._window.total_available

    @property
    def is_loading_more(self) -> bool:
        return self._loading_more

    @property
    def load_state(self) -> LoadState:
        return self._store.state

    @property
    def error(self) -> str | None:
        return self._store.error

    @property
    def has_active_filters(self) -> bool:
        return self._criteria.is_active

    # ------------------------------------------------------------------
    # Dataset
    # ------------------------------------------------------------------

    async def load_category(self, category_id: str) -> bool:
        """Replace the dataset with the batch for `category_id`.

        Returns:
            True if the dataset was replaced. A failed load leaves the
            previous dataset in place with load_state == failed; a load
            superseded by a newer one is dropped.
        """
        loaded = await self._store.load(category_id)
        if loaded:
            self._recompute()
        return loaded

    async def select_category(self, level: int, category_id: str) -> bool:
        """Choose a category at `level` in the cascading selector and load it.

        Deeper selections are cleared; the category's children become the
        next level's options. The path only changes when the load replaces
        the dataset, so it always names the category on display.
        """
        path = self._path.select(level, category_id)
        loaded = await self.load_category(category_id)
        if loaded:
            self._path = path
        return loaded

    async def start(self) -> bool:
        """Select and load the configured default category."""
        category = self._tree.get(self._config.default_category)
        if category is not None and category.level == 1:
            return await self.select_category(1, category.id)
        return await self.load_category(self._config.default_category)

    async def aclose(self) -> None:
        """Release the keyword source's resources, if it holds any."""
        close = getattr(self._store.source, "aclose", None)
        if close is not None:
            await close()

    # ------------------------------------------------------------------
    # Criteria
    # ------------------------------------------------------------------

    def set_criteria(self, criteria: FilterCriteria) -> None:
        self._criteria = criteria
        self._recompute()

    def set_search_term(self, term: str) -> None:
        self.set_criteria(self._criteria.with_search_term(term))

    def set_volume_preset(self, threshold: int) -> None:
        self.set_criteria(self._criteria.with_volume(VolumeFilter.preset(threshold)))

    def set_custom_volume(
        self,
        min_volume: str | int | None = None,
        max_volume: str | int | None = None,
    ) -> None:
        """Custom search-volume range; blank or non-numeric bounds are left open."""
        self.set_criteria(self._criteria.with_volume(VolumeFilter.custom(min_volume, max_volume)))

    def clear_volume_filter(self) -> None:
        self.set_criteria(self._criteria.with_volume(VolumeFilter.off()))

    def toggle_brand(self, value: BrandOption | str) -> None:
        self.set_criteria(self._criteria.toggle_brand(value))

    def toggle_search_type(self, value: SearchType | str) -> None:
        self.set_criteria(self._criteria.toggle_search_type(value))

    def toggle_competition(self, value: Competition | str) -> None:
        self.set_criteria(self._criteria.toggle_competition(value))

    def reset_filters(self) -> None:
        self.set_criteria(FilterCriteria())

    # ------------------------------------------------------------------
    # Sort
    # ------------------------------------------------------------------

    def sort_by(self, key: SortKey | str) -> None:
        self._sort = self._sort.toggle(key)
        self._recompute()

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    async def load_more(self) -> bool:
        """Grow the visible window by one increment after a short delay.

        Calls made while a previous one is pending are ignored, not queued.

        Returns:
            True if the window grew.
        """
        if self._loading_more or not self._window.has_more:
            return False

        self._loading_more = True
        generation = self._generation
        try:
            await asyncio.sleep(self._config.load_more_delay)
            # The view was recomputed meanwhile; its window starts over
            if generation != self._generation:
                return False
            return self._window.load_more()
        finally:
            self._loading_more = False

    def is_near_end(self, scroll_top: float, client_height: float, scroll_height: float) -> bool:
        return scroll_top + client_height >= scroll_height - self._config.scroll_threshold

    async def on_scroll(self, scroll_top: float, client_height: float, scroll_height: float) -> bool:
        """Scroll-proximity signal from the presentation layer.

        Returns:
            True if it caused the window to grow.
        """
        if not self.is_near_end(scroll_top, client_height, scroll_height):
            return False
        return await self.load_more()

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _recompute(self) -> None:
        records = self._store.records
        if records is None:
            return
        filtered = filter_records(records, self._criteria)
        self._view = sort_records(filtered, self._sort)
        self._generation += 1
        self._window.reset(len(self._view))
        logger.debug(
            "Recomputed view: %d of %d keywords, sort %s %s",
            len(self._view),
            len(records),
            self._sort.key.value,
            self._sort.direction.value,
        )
