"""
Paging Examples

Walks the pages of a lazy source, and shows how the total count is
reported for free on the last page or paid for with want_total.
"""

import asyncio
from collections.abc import AsyncIterator, Iterator

from pagedset import Page, SubsetOptions, from_async_iterable, from_collection, from_iterable


def read_lines() -> Iterator[str]:
    """A lazy source, e.g. lines streamed from a file."""
    for number in range(23):
        yield f"line {number}"


# Walk all pages; the total only shows up on the last one
options = SubsetOptions.for_page_number(1, 10)
while True:
    page = from_iterable(read_lines(), options)
    print(f"Page {options.page_number}: {list(page)} (total: {page.total})")
    if not page.has_next:
        break
    options = options.next()

# Ask for the total up front, at the cost of reading the whole source
page = from_iterable(read_lines(), SubsetOptions.for_page_number(1, 10, want_total=True))
assert isinstance(page, Page)
print(f"Page {page.number} of {page.page_count}")

# Windows that are not page-aligned are plain subsets
subset = from_collection(list(range(100)), SubsetOptions.for_offset(15, 10))
print(f"Skip {subset.skip}: {list(subset)}, has_previous={subset.has_previous}")


async def fetch_rows() -> AsyncIterator[dict[str, int]]:
    """An async source, e.g. rows streamed from a database cursor."""
    for row_id in range(42):
        await asyncio.sleep(0)
        yield {"id": row_id}


async def count_rows() -> int:
    return 42


async def main() -> None:
    options = SubsetOptions.for_page_number(2, 20, want_total=True)
    page = await from_async_iterable(fetch_rows(), options, count=count_rows)
    print(f"Rows {page.skip}..{page.skip + page.count - 1} of {page.total}")


asyncio.run(main())
