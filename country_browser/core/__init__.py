"""
Core domain layer: country records, table state and the derived
filter/sort/paginate view
"""

from .country import COLUMNS, COLUMN_IDS, Country, Language
from .table_state import FilterState, PageState, SortDirection, SortState, TableState
from .table_view import TableView, derive_table_view, filter_and_sort

__all__ = [
    "COLUMNS",
    "COLUMN_IDS",
    "Country",
    "Language",
    "FilterState",
    "PageState",
    "SortDirection",
    "SortState",
    "TableState",
    "TableView",
    "derive_table_view",
    "filter_and_sort",
]
