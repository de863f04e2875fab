#!/usr/bin/env python3
"""
Example script demonstrating grab pagination helpers.

This script:
1. Simulates a paginated API serving cursors, where an empty cursor marks the last page
2. Collects every item with all_pages_async, bounded by a timeout
3. Picks a page size from a precedence chain with first_non_zero
"""
import asyncio
import os
from dataclasses import dataclass

from grab import Page, all_pages_async, first_non_zero, if_


@dataclass
class Fruit:
    name: str
    stock: int


FRUITS = [
    Fruit("apple", 3),
    Fruit("banana", 0),
    Fruit("cherry", 12),
    Fruit("date", 7),
    Fruit("elderberry", 1),
]


@dataclass
class FakeApi:
    """In memory stand in for a remote API returning cursor based pages"""

    page_size: int

    async def list_fruits(self, ctx, cursor: str | None) -> Page[Fruit, str]:
        await asyncio.sleep(0.05)
        start = int(cursor or 0)
        end = start + self.page_size
        print(f"📥 Fetched page starting at {start} ({ctx['request_id']})")
        return Page(items=FRUITS[start:end], next_page_id=if_(end < len(FRUITS), str(end), ""))


async def main():
    page_size = first_non_zero(int(os.getenv("PAGE_SIZE", "0")), 2)
    api = FakeApi(page_size=page_size)

    ctx = {"request_id": "example"}
    fruits = await asyncio.wait_for(all_pages_async(ctx, api.list_fruits), timeout=5)

    print()
    print(f"✅ Collected {len(fruits)} fruits with page size {page_size}")
    for fruit in fruits:
        print(f"   {fruit.name}: {fruit.stock}")


if __name__ == "__main__":
    asyncio.run(main())
