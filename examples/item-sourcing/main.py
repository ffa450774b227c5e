#!/usr/bin/env python3
"""Example: browsing a category's keywords with the keyword table engine.

Loads the default category, applies a few filters and sorts, and scrolls
through the results the way the item-sourcing table does.

Usage:
    # Synthetic data (no backend needed)
    python main.py

    # Against a keyword backend serving GET /keywords?category=<id>
    KWTABLE_SOURCE_URL=http://localhost:8000 python main.py
"""

import asyncio
import logging
import sys
from pathlib import Path

from engine import KeywordRecord, KeywordTableSession, load_config
from shared.types import LoadState, SortKey

CONFIG_FILE = Path(__file__).with_name("kwtable.config.yaml")


def print_table(session: KeywordTableSession, title: str, limit: int = 5) -> None:
    print(f"\n{title}")
    print(f"  {session.total_available} results found, showing {len(session.visible_records)}")
    print("-" * 80)
    for i, record in enumerate(session.visible_records[:limit], 1):
        print(f"  {i:>3}. {format_record(record)}")


def format_record(record: KeywordRecord) -> str:
    brand = "brand" if record.is_brand else "generic"
    return (
        f"{record.name[:32]:<32} {record.search_volume:>7,} searches "
        f"{record.product_count:>6,} products  {record.competition_level.value:<6} "
        f"{record.search_type.value:<13} {brand}"
    )


async def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = load_config(CONFIG_FILE)
    session = KeywordTableSession(config)

    try:
        await browse(session)
    finally:
        await session.aclose()


async def browse(session: KeywordTableSession) -> None:
    print("Loading default category...")
    await session.start()
    if session.load_state == LoadState.failed:
        print(f"Load failed: {session.error}")
        return

    print("Categories:", " > ".join(c.name for c in session.path.selected))
    print_table(session, "Top keywords by search volume")

    # Drill down to a subcategory
    await session.select_category(2, "1-1")
    print("\nCategories:", " > ".join(c.name for c in session.path.selected))
    print_table(session, "Women's Clothing")

    # Brand keywords with low or medium competition
    session.toggle_brand("brand")
    session.toggle_competition("Low")
    session.toggle_competition("Medium")
    print_table(session, "Brand keywords, low/medium competition")

    # Custom range, sorted by product count
    session.set_custom_volume("10000", "20000")
    session.sort_by(SortKey.product_count)
    print_table(session, "10,000-20,000 searches, most products first")

    # Scroll to the bottom
    while await session.on_scroll(scroll_top=1e9, client_height=600, scroll_height=1e9):
        print(f"  loaded more: {session.window.visible_count}/{session.total_available}")

    session.reset_filters()
    print_table(session, "Filters reset")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(1)
