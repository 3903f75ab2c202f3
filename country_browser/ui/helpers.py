from __future__ import annotations

from typing import List, Optional

import dash_bootstrap_components as dbc
from dash import html

from country_browser.core.country import COLUMNS, Country
from country_browser.core.table_state import SortState
from country_browser.core.table_view import TableView
from country_browser.services.country_query import QueryResult, QueryStatus

ROW_HEIGHT_PX = 53


def sort_header_label(label: str, column: str, sort: SortState):
    if column != sort.column:
        return label
    arrow = "▼" if sort.descending else "▲"
    return [label, html.Span(f" {arrow}", className="cb-sort-arrow")]


def sort_header_labels(sort: SortState) -> list:
    return [sort_header_label(col.label, col.id, sort) for col in COLUMNS]


def country_row(country: Country, index: int) -> html.Tr:
    # The row key is the list position; the list is never mutated in place
    return html.Tr(
        [html.Td(country.value_for(col.id)) for col in COLUMNS],
        key=str(index),
    )


def table_body_rows(view: TableView) -> List[html.Tr]:
    rows = [country_row(c, i) for i, c in enumerate(view.rows)]

    # Keep the table height constant on the last page
    if view.empty_rows > 0:
        rows.append(
            html.Tr(
                html.Td(colSpan=len(COLUMNS)),
                style={"height": f"{ROW_HEIGHT_PX * view.empty_rows}px"},
                className="cb-empty-rows",
            )
        )
    return rows


def query_status_banner(result: Optional[QueryResult]):
    if result is None or result.status == QueryStatus.LOADING:
        return html.P("Loading...", className="text-muted mb-0")
    if result.status == QueryStatus.ERROR:
        return dbc.Alert(f"Error: {result.error}", color="danger", className="mb-0")
    return None


def row_count_text(view: TableView) -> str:
    total = view.filtered_count
    if total == 0:
        return "0 of 0"
    size = view.state.page.page_size
    start = view.state.page.page * size
    return f"{start + 1}–{start + len(view.rows)} of {total}"
