from __future__ import annotations

from typing import Tuple

import dash_bootstrap_components as dbc
from dash import dcc, html

from country_browser.core.country import COLUMNS
from country_browser.core.table_state import SortState
from country_browser.ui.helpers import sort_header_label
from country_browser.ui.ids import IDs, sort_header_id
from country_browser.ui.layout.build_filter_bar import build_filter_bar


def _build_header() -> html.Thead:
    sort = SortState()
    return html.Thead(
        html.Tr(
            [
                html.Th(
                    html.Button(
                        sort_header_label(col.label, col.id, sort),
                        id=sort_header_id(col.id),
                        n_clicks=0,
                        className="btn btn-link p-0 fw-semibold text-decoration-none cb-sort-btn",
                    )
                )
                for col in COLUMNS
            ]
        )
    )


def build_table_panel(page_size_options: Tuple[int, ...], default_page_size: int) -> dbc.Card:
    return dbc.Card(
        [
            build_filter_bar(),
            html.Div(id=IDs.Control.STATUS_BAR, className="px-3"),
            dcc.Loading(
                id="table-loading",
                type="default",
                children=dbc.Table(
                    [
                        _build_header(),
                        html.Tbody(id=IDs.Control.TABLE_BODY),
                    ],
                    hover=True,
                    responsive=True,
                    className="mb-0 cb-table",
                ),
            ),
            dbc.CardFooter(
                html.Div(
                    [
                        html.Span("Rows per page", className="me-2 text-muted small"),
                        dcc.Dropdown(
                            id=IDs.Control.PAGE_SIZE_SELECT,
                            options=[{"label": str(s), "value": s} for s in page_size_options],
                            value=default_page_size,
                            clearable=False,
                            style={"width": "90px"},
                            className="me-3",
                        ),
                        html.Span(id=IDs.Control.ROW_COUNT, className="me-3 small"),
                        dbc.Pagination(
                            id=IDs.Control.PAGINATION,
                            max_value=1,
                            active_page=1,
                            first_last=True,
                            previous_next=True,
                            fully_expanded=False,
                            size="sm",
                            className="mb-0",
                        ),
                    ],
                    className="d-flex justify-content-end align-items-center",
                ),
            ),
        ],
        className="cb-maincard",
    )
