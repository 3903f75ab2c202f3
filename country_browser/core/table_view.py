"""
Derived table rows: filter -> stable sort -> paginate.

Everything here is a pure function of (countries, TableState). The page
recomputes from scratch on every state change; no caches are kept.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import List, Mapping, Sequence, Tuple

from .country import Country
from .table_state import SortState, TableState


@dataclass(frozen=True)
class TableView:
    rows: List[Country] = field(default_factory=list)
    filtered: List[Country] = field(default_factory=list)
    state: TableState = field(default_factory=TableState)
    page_count: int = 0
    empty_rows: int = 0

    @property
    def filtered_count(self) -> int:
        return len(self.filtered)


def _contains(value: str | None, needle: str) -> bool:
    if not value:
        return False
    return needle in value.lower()


def matches_filters(country: Country, filters: Mapping[str, str]) -> bool:
    for column, text in filters.items():
        if not text:
            continue
        needle = text.lower()

        if column == "languages":
            if not any(_contains(lang.name, needle) for lang in country.languages):
                return False
        elif not _contains(getattr(country, column, None), needle):
            # capital/currency may be None; that never matches
            return False
    return True


def apply_filters(countries: Sequence[Country], filters: Mapping[str, str]) -> List[Country]:
    return [c for c in countries if matches_filters(c, filters)]


def stable_sort(countries: Sequence[Country], sort: SortState) -> List[Country]:
    """
    Sort on the raw string value of the sort column.

    Each row carries its input index and ties are broken on it in both
    directions, so equal keys keep their input order even when descending.
    """
    sign = -1 if sort.descending else 1

    def compare(a: Tuple[str, int, Country], b: Tuple[str, int, Country]) -> int:
        if a[0] != b[0]:
            return sign * (1 if a[0] > b[0] else -1)
        return a[1] - b[1]

    indexed = [(c.value_for(sort.column), i, c) for i, c in enumerate(countries)]
    indexed.sort(key=cmp_to_key(compare))
    return [c for _, _, c in indexed]


def filter_and_sort(countries: Sequence[Country], state: TableState) -> List[Country]:
    """Rows that match the filters, in sort order. Pagination is not applied."""
    return stable_sort(apply_filters(countries, state.filters.active()), state.sort)


def paginate(rows: Sequence[Country], page: int, page_size: int) -> List[Country]:
    start = page * page_size
    return list(rows[start:start + page_size])


def page_count(filtered_count: int, page_size: int) -> int:
    return math.ceil(filtered_count / page_size)


def empty_rows(filtered_count: int, page: int, page_size: int) -> int:
    on_page = max(0, min(page_size, filtered_count - page * page_size))
    return page_size - on_page


def derive_table_view(countries: Sequence[Country], state: TableState) -> TableView:
    filtered = filter_and_sort(countries, state)

    # Filtering after paging deep can leave the page past the end
    state = state.clamped(len(filtered))
    page = state.page.page
    size = state.page.page_size

    return TableView(
        rows=paginate(filtered, page, size),
        filtered=filtered,
        state=state,
        page_count=page_count(len(filtered), size),
        empty_rows=empty_rows(len(filtered), page, size),
    )
