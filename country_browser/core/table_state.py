from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from .country import COLUMN_IDS
from .exceptions import TableStateError

DEFAULT_PAGE_SIZE_OPTIONS: Tuple[int, ...] = (5, 10, 25, 50, 100, 251)


def _check_column(column: str) -> None:
    if column not in COLUMN_IDS:
        raise TableStateError(f"Unknown column '{column}'")


class SortDirection(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortState:
    """
    Active sort column + direction.

    Direction only means something relative to the current column, so
    switching column always starts again at ascending.
    """

    column: str = "name"
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        _check_column(self.column)

    def toggled(self, column: str) -> SortState:
        _check_column(column)
        if column == self.column and self.direction == SortDirection.ASC:
            return SortState(column=column, direction=SortDirection.DESC)
        return SortState(column=column, direction=SortDirection.ASC)

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESC


@dataclass(frozen=True)
class FilterState:
    """
    Per-column substring patterns. '' means no constraint for that column;
    all non-empty patterns are combined with AND.
    """

    values: Tuple[Tuple[str, str], ...] = field(
        default_factory=lambda: tuple((c, "") for c in COLUMN_IDS)
    )

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Optional[str]]]) -> FilterState:
        mapping = mapping or {}
        for column in mapping:
            _check_column(column)
        return cls(values=tuple((c, mapping.get(c) or "") for c in COLUMN_IDS))

    def as_dict(self) -> Dict[str, str]:
        return dict(self.values)

    def get(self, column: str) -> str:
        return self.as_dict().get(column, "")

    def with_value(self, column: str, text: Optional[str]) -> FilterState:
        _check_column(column)
        updated = self.as_dict()
        updated[column] = text or ""
        return FilterState.from_mapping(updated)

    def active(self) -> Dict[str, str]:
        return {c: v for c, v in self.values if v != ""}


@dataclass(frozen=True)
class PageState:
    page: int = 0
    page_size: int = 5
    page_size_options: Tuple[int, ...] = DEFAULT_PAGE_SIZE_OPTIONS

    def __post_init__(self) -> None:
        if self.page_size not in self.page_size_options:
            raise TableStateError(
                f"Page size {self.page_size} not in {list(self.page_size_options)}"
            )
        if self.page < 0:
            raise TableStateError(f"Page index must be >= 0, got {self.page}")

    def with_page(self, page: int) -> PageState:
        return replace(self, page=page)

    def with_page_size(self, page_size: int) -> PageState:
        # The old index may point past the end with the new size
        return replace(self, page=0, page_size=page_size)

    def clamped(self, filtered_count: int) -> PageState:
        last = max(0, math.ceil(filtered_count / self.page_size) - 1)
        page = min(self.page, last)
        return self if page == self.page else replace(self, page=page)


@dataclass(frozen=True)
class TableState:
    """
    Everything the user can change on the table. Stored in a dcc.Store
    between callbacks; every transition returns a new instance.
    """

    sort: SortState = field(default_factory=SortState)
    filters: FilterState = field(default_factory=FilterState)
    page: PageState = field(default_factory=PageState)

    @classmethod
    def initial(
            cls,
            page_size: int = 5,
            page_size_options: Tuple[int, ...] = DEFAULT_PAGE_SIZE_OPTIONS,
    ) -> TableState:
        return cls(page=PageState(page=0, page_size=page_size, page_size_options=tuple(page_size_options)))

    def with_sort_request(self, column: str) -> TableState:
        return replace(self, sort=self.sort.toggled(column))

    def with_filters(self, mapping: Mapping[str, Optional[str]]) -> TableState:
        return replace(self, filters=FilterState.from_mapping(mapping))

    def with_filter(self, column: str, text: Optional[str]) -> TableState:
        return replace(self, filters=self.filters.with_value(column, text))

    def with_page(self, page: int) -> TableState:
        return replace(self, page=self.page.with_page(page))

    def with_page_size(self, page_size: int) -> TableState:
        return replace(self, page=self.page.with_page_size(page_size))

    def clamped(self, filtered_count: int) -> TableState:
        return replace(self, page=self.page.clamped(filtered_count))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sort_column": self.sort.column,
            "sort_direction": self.sort.direction.value,
            "filters": self.filters.as_dict(),
            "page": self.page.page,
            "page_size": self.page.page_size,
            "page_size_options": list(self.page.page_size_options),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> TableState:
        if not data:
            return cls()
        return cls(
            sort=SortState(
                column=data.get("sort_column", "name"),
                direction=SortDirection(data.get("sort_direction", "asc")),
            ),
            filters=FilterState.from_mapping(data.get("filters")),
            page=PageState(
                page=int(data.get("page", 0)),
                page_size=int(data.get("page_size", 5)),
                page_size_options=tuple(data.get("page_size_options", DEFAULT_PAGE_SIZE_OPTIONS)),
            ),
        )
