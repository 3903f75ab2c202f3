from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output, State, exceptions

from country_browser.core.exceptions import ExportError
from country_browser.core.table_state import TableState
from country_browser.core.table_view import filter_and_sort
from country_browser.services.country_query import QueryResult
from country_browser.ui.ids import IDs

if TYPE_CHECKING:
    from country_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_export_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Export: filtered + sorted rows (all pages) -> Countries.xlsx
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_XLSX, "data"),
        Input(IDs.Control.EXPORT_BTN, "n_clicks"),
        State(IDs.Store.TABLE_STATE, "data"),
        State(IDs.Store.QUERY_RESULT, "data"),
        State(IDs.Store.MOUNT_ID, "data"),
        prevent_initial_call=True,
    )
    def export_countries(n_clicks, ts_data: dict[str, Any] | None, qr_data, mount_id):
        if not n_clicks:
            raise exceptions.PreventUpdate

        result = QueryResult.from_dict(qr_data)
        if result is None or not result.is_ready or not result.belongs_to(mount_id):
            raise exceptions.PreventUpdate

        rows = filter_and_sort(result.countries, TableState.from_dict(ts_data))

        try:
            return ctx.export_service.download(rows)
        except ExportError:
            logger.exception("Export failed", extra={"n_rows": len(rows)})
            raise exceptions.PreventUpdate
