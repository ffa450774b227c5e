"""Growable visible prefix over the derived view (infinite scroll)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


class PaginationWindow:
    """Visible-count cursor.

    Invariant: 0 <= visible_count <= total_available.
    """

    def __init__(self, page_size: int = 30, increment: int = 20) -> None:
        if page_size < 0 or increment <= 0:
            raise ValueError("page_size must be >= 0 and increment > 0")
        self._page_size = page_size
        self._increment = increment
        self._total = 0
        self._visible = 0

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def increment(self) -> int:
        return self._increment

    @property
    def visible_count(self) -> int:
        return self._visible

    @property
    def total_available(self) -> int:
        return self._total

    @property
    def has_more(self) -> bool:
        return self._visible < self._total

    def reset(self, total_available: int | None = None) -> None:
        """Back to the initial page size, optionally with a new view length."""
        if total_available is not None:
            self._total = max(0, total_available)
        self._visible = min(self._page_size, self._total)

    def load_more(self) -> bool:
        """Grow by one increment, clamped to the total.

        Returns:
            True if visible_count increased, False when already at the end.
        """
        if not self.has_more:
            return False
        self._visible = min(self._visible + self._increment, self._total)
        return True

    def visible_slice(self, view: Sequence[T]) -> list[T]:
        return list(view[: self._visible])

    def __repr__(self) -> str:
        return f"PaginationWindow(visible={self._visible}, total={self._total})"
