"""Pure search and pagination over the record collection.

Nothing here holds state: views are recomputed from (records, query, page)
every time one of them changes.
"""
import math
from dataclasses import dataclass
from typing import Sequence

from pokedex_browser.config import settings
from pokedex_browser.models import DetailRecord

PAGE_SIZE = settings.page_size


@dataclass(frozen=True)
class PageSlice:
    filtered: Sequence[DetailRecord]
    visible: Sequence[DetailRecord]
    page: int
    total_pages: int


def normalize_query(query: str) -> str:
    return query.strip().casefold()


def matches(record: DetailRecord, needle: str) -> bool:
    """Substring match on the name or on any category; `needle` must be normalized."""
    if needle in record.name.casefold():
        return True
    return any(needle in category.casefold() for category in record.categories)


def filter_records(records: Sequence[DetailRecord], query: str) -> Sequence[DetailRecord]:
    needle = normalize_query(query)
    if not needle:
        return records
    return [record for record in records if matches(record, needle)]


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(count / page_size)


def clamp_page(page: int, pages: int) -> int:
    return min(max(page, 1), max(1, pages))


def paginate(records: Sequence[DetailRecord], page: int, page_size: int = PAGE_SIZE) -> Sequence[DetailRecord]:
    # Out-of-range pages give an empty slice, never an error
    start = (page - 1) * page_size
    if start < 0:
        return []
    return records[start:start + page_size]


def derive_page(records: Sequence[DetailRecord], query: str, page: int, page_size: int = PAGE_SIZE) -> PageSlice:
    filtered = filter_records(records, query)
    pages = total_pages(len(filtered), page_size)
    current = clamp_page(page, pages)
    return PageSlice(
        filtered=filtered,
        visible=paginate(filtered, current, page_size),
        page=current,
        total_pages=pages,
    )
