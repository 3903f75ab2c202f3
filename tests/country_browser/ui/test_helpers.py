from __future__ import annotations

import dash_bootstrap_components as dbc

from country_browser.core.country import Country
from country_browser.core.table_state import SortDirection, SortState, TableState
from country_browser.core.table_view import derive_table_view
from country_browser.services.country_query import QueryResult
from country_browser.ui.helpers import (
    ROW_HEIGHT_PX,
    query_status_banner,
    row_count_text,
    sort_header_labels,
    table_body_rows,
)


def _countries(n: int):
    return [Country(name=f"Country {i:02d}", native=f"Native {i}") for i in range(n)]


def test_body_pads_short_last_page():
    view = derive_table_view(_countries(3), TableState())

    rows = table_body_rows(view)

    assert len(rows) == 4
    assert rows[-1].style == {"height": f"{ROW_HEIGHT_PX * 2}px"}


def test_full_page_has_no_padding_row():
    view = derive_table_view(_countries(5), TableState())
    assert len(table_body_rows(view)) == 5


def test_missing_capital_renders_as_empty_cell():
    view = derive_table_view([Country(name="Nowhere", native="Nowhere")], TableState())

    first = table_body_rows(view)[0]
    cells = [td.children for td in first.children]

    assert cells == ["Nowhere", "Nowhere", "", "", ""]


def test_only_active_column_shows_arrow():
    labels = sort_header_labels(SortState("currency", SortDirection.DESC))

    assert labels[0] == "Name"
    assert labels[-1][0] == "Currency"
    assert "▼" in labels[-1][1].children


def test_status_banner_states():
    assert query_status_banner(None).children == "Loading..."
    assert query_status_banner(QueryResult.loading("m")).children == "Loading..."

    alert = query_status_banner(QueryResult.failed("m", "Network down"))
    assert isinstance(alert, dbc.Alert)
    assert alert.children == "Error: Network down"

    assert query_status_banner(QueryResult.ready("m", [])) is None


def test_row_count_text():
    view = derive_table_view(_countries(12), TableState().with_page(2))
    assert row_count_text(view) == "11–12 of 12"

    assert row_count_text(derive_table_view([], TableState())) == "0 of 0"
