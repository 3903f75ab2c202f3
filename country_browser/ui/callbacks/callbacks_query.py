from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, exceptions

from country_browser.services.country_query import run_country_query
from country_browser.ui.ids import IDs

if TYPE_CHECKING:
    from country_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_query_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Page load: mount token -> one countries query
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.QUERY_RESULT, "data"),
        Input(IDs.Store.MOUNT_ID, "data"),
    )
    def load_countries(mount_id: str | None):
        """Runs once per page load; the result is tagged with the mount token."""
        if not mount_id:
            raise exceptions.PreventUpdate

        result = run_country_query(ctx.query_client, mount_id)
        return result.to_dict()
