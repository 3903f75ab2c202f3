from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional

import dash
from dash import ALL, Input, Output, State, exceptions

from country_browser.core.table_state import TableState
from country_browser.core.table_view import derive_table_view
from country_browser.services.country_query import QueryResult
from country_browser.ui.helpers import (
    query_status_banner,
    row_count_text,
    sort_header_labels,
    table_body_rows,
)
from country_browser.ui.ids import IDs

if TYPE_CHECKING:
    from country_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def next_table_state(
        state: TableState,
        trigger: Any,
        *,
        filters: Optional[Mapping[str, Optional[str]]] = None,
        active_page: Optional[int] = None,
        page_size: Optional[int] = None,
) -> TableState:
    """
    Apply the control that fired to the stored state.

    `trigger` is dash's triggered_id: a string id or a pattern-matching dict.
    Anything else (initial call, new query result) leaves the state as is.
    """
    if isinstance(trigger, Mapping):
        kind = trigger.get("type")
        if kind == IDs.Pattern.SORT_HEADER:
            return state.with_sort_request(trigger["index"])
        if kind == IDs.Pattern.FILTER_INPUT:
            return state.with_filters(filters or {})
        return state

    if trigger == IDs.Control.PAGINATION and active_page:
        # dbc.Pagination is 1-based
        return state.with_page(max(0, int(active_page) - 1))

    if trigger == IDs.Control.PAGE_SIZE_SELECT and page_size:
        return state.with_page_size(int(page_size))

    return state


def register_table_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Controls + query result -> TableState -> rendered table
    # ---------------------------------------------------------
    # Pagination.active_page is both an input and an output of this callback
    @app.callback(
        Output(IDs.Store.TABLE_STATE, "data"),
        Output(IDs.Control.TABLE_BODY, "children"),
        Output({"type": IDs.Pattern.SORT_HEADER, "index": ALL}, "children"),
        Output(IDs.Control.PAGINATION, "max_value"),
        Output(IDs.Control.PAGINATION, "active_page"),
        Output(IDs.Control.ROW_COUNT, "children"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Output(IDs.Control.EXPORT_BTN, "disabled"),
        Input(IDs.Store.QUERY_RESULT, "data"),
        Input({"type": IDs.Pattern.FILTER_INPUT, "index": ALL}, "value"),
        Input({"type": IDs.Pattern.SORT_HEADER, "index": ALL}, "n_clicks"),
        Input(IDs.Control.PAGINATION, "active_page"),
        Input(IDs.Control.PAGE_SIZE_SELECT, "value"),
        State(IDs.Store.TABLE_STATE, "data"),
        State(IDs.Store.MOUNT_ID, "data"),
    )
    def update_table(qr_data, _filter_values, _sort_clicks, active_page, page_size, ts_data, mount_id):
        result = QueryResult.from_dict(qr_data)
        if result is not None and not result.belongs_to(mount_id):
            # Result of an abandoned page load
            raise exceptions.PreventUpdate

        filters = {
            item["id"]["index"]: item.get("value")
            for item in dash.ctx.inputs_list[1]
        }

        state = TableState.from_dict(ts_data) if ts_data else ctx.initial_table_state()
        state = next_table_state(
            state,
            dash.ctx.triggered_id,
            filters=filters,
            active_page=active_page,
            page_size=page_size,
        )

        countries = result.countries if result is not None and result.is_ready else []
        view = derive_table_view(countries, state)

        banner = query_status_banner(result)
        if result is None or not result.is_ready:
            body = []
        else:
            body = table_body_rows(view)

        return (
            view.state.to_dict(),
            body,
            sort_header_labels(view.state.sort),
            max(1, view.page_count),
            view.state.page.page + 1,
            row_count_text(view),
            banner,
            result is None or not result.is_ready,
        )
