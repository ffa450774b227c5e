"""Product category taxonomy.

Categories are static configuration: built once from nested mappings,
never mutated, only traversed. Levels and parent ids are derived from
the nesting so the child-level invariant cannot be violated by data.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from shared.config import load_yaml_file

DEFAULT_TAXONOMY: list[dict[str, Any]] = [
    {
        "id": "1",
        "name": "Fashion",
        "children": [
            {
                "id": "1-1",
                "name": "Women's Clothing",
                "children": [
                    {
                        "id": "1-1-1",
                        "name": "Dresses",
                        "children": [
                            {"id": "1-1-1-1", "name": "Mini Dresses"},
                            {"id": "1-1-1-2", "name": "Maxi Dresses"},
                        ],
                    },
                    {"id": "1-1-2", "name": "T-Shirts"},
                    {"id": "1-1-3", "name": "Blouses/Shirts"},
                ],
            },
            {
                "id": "1-2",
                "name": "Men's Clothing",
                "children": [
                    {"id": "1-2-1", "name": "T-Shirts"},
                    {"id": "1-2-2", "name": "Shirts"},
                    {"id": "1-2-3", "name": "Pants"},
                ],
            },
        ],
    },
    {
        "id": "2",
        "name": "Furniture/Interior",
        "children": [
            {
                "id": "2-1",
                "name": "Bedroom Furniture",
                "children": [
                    {
                        "id": "2-1-1",
                        "name": "Beds",
                        "children": [
                            {"id": "2-1-1-1", "name": "Single Beds"},
                            {"id": "2-1-1-2", "name": "Double Beds"},
                            {"id": "2-1-1-3", "name": "Queen Beds"},
                        ],
                    },
                    {"id": "2-1-2", "name": "Mattresses"},
                    {"id": "2-1-3", "name": "Wardrobes"},
                ],
            },
            {
                "id": "2-2",
                "name": "Living Room Furniture",
                "children": [
                    {"id": "2-2-1", "name": "Sofas"},
                    {"id": "2-2-2", "name": "Tables"},
                    {"id": "2-2-3", "name": "Chairs"},
                ],
            },
        ],
    },
]


@dataclass(frozen=True)
class Category:
    """A node in the product taxonomy."""

    id: str
    name: str
    level: int
    parent_id: str | None = None
    children: tuple[Category, ...] = field(default=(), compare=False, repr=False)

    @property
    def has_children(self) -> bool:
        return bool(self.children)


def _build_node(node: Mapping[str, Any], level: int, parent_id: str | None) -> Category:
    if "id" not in node or "name" not in node:
        raise ValueError(f"Category node needs 'id' and 'name': {dict(node)!r}")

    category_id = str(node["id"])
    children = tuple(
        _build_node(child, level + 1, category_id) for child in node.get("children") or ()
    )
    return Category(
        id=category_id,
        name=str(node["name"]),
        level=level,
        parent_id=parent_id,
        children=children,
    )


class CategoryTree:
    """Immutable category hierarchy with id lookup."""

    def __init__(self, roots: Sequence[Category]) -> None:
        self._roots = tuple(roots)
        self._index: dict[str, Category] = {}
        for category in self.walk():
            if category.id in self._index:
                raise ValueError(f"Duplicate category id: {category.id}")
            self._index[category.id] = category

    @classmethod
    def from_nodes(cls, nodes: Sequence[Mapping[str, Any]]) -> CategoryTree:
        """Build a tree from nested `{"id", "name", "children"}` mappings."""
        return cls([_build_node(node, 1, None) for node in nodes])

    @classmethod
    def from_yaml(cls, path: str | Path) -> CategoryTree:
        """Build a tree from a YAML file holding a list of nested nodes.

        A top-level `categories:` key is also accepted.
        """
        raw = load_yaml_file(path)
        if isinstance(raw, dict):
            raw = raw.get("categories", [])
        if not isinstance(raw, list):
            raise ValueError(f"Taxonomy file {path} must contain a list of categories")
        return cls.from_nodes(raw)

    @classmethod
    def default(cls) -> CategoryTree:
        return cls.from_nodes(DEFAULT_TAXONOMY)

    @property
    def roots(self) -> tuple[Category, ...]:
        return self._roots

    def walk(self) -> Iterator[Category]:
        """Yield every category depth-first, in declaration order."""
        stack = list(reversed(self._roots))
        while stack:
            category = stack.pop()
            yield category
            stack.extend(reversed(category.children))

    def get(self, category_id: str) -> Category | None:
        return self._index.get(category_id)

    def find_name(self, category_id: str) -> str:
        """Resolve a category's display name.

        Returns an empty string when the id is unknown; this is a label
        fallback, not an error.
        """
        category = self.get(category_id)
        return category.name if category else ""

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._index


@dataclass(frozen=True)
class CategoryPath:
    """Cascading category selection: one selected category per level.

    Selecting a category at level N drops the selections below it, and
    its children become the options offered at level N + 1.
    """

    tree: CategoryTree = field(compare=False)
    selected: tuple[Category, ...] = ()

    def select(self, level: int, category_id: str) -> CategoryPath:
        """Return the path after choosing `category_id` at `level`.

        Raises:
            ValueError: If the category is not offered at that level.
        """
        offered = self.options(level)
        category = next((c for c in offered if c.id == category_id), None)
        if category is None:
            raise ValueError(f"Category {category_id!r} is not an option at level {level}")
        kept = tuple(c for c in self.selected if c.level < level)
        return CategoryPath(self.tree, kept + (category,))

    def options(self, level: int) -> tuple[Category, ...]:
        """Categories selectable at `level`; empty when the level is not reachable."""
        if level == 1:
            return self.tree.roots
        if level - 2 < len(self.selected):
            return self.selected[level - 2].children
        return ()

    @property
    def levels(self) -> list[tuple[int, tuple[Category, ...]]]:
        """Every level that currently has options, with those options."""
        result = [(1, self.tree.roots)]
        for category in self.selected:
            if not category.children:
                break
            result.append((category.level + 1, category.children))
        return result

    @property
    def current(self) -> Category | None:
        """Deepest selected category."""
        return self.selected[-1] if self.selected else None
