from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from country_browser.services.country_query import QueryResult, new_mount_id
from country_browser.ui.ids import IDs
from country_browser.ui.layout.build_navbar import build_navbar
from country_browser.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from country_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    """
    Called once per page load (app.layout is a function), so every load
    gets its own mount token.
    """
    mount_id = new_mount_id()
    global_config = ctx.global_config

    return dbc.Container(
        fluid=True,
        className="cb-root",
        children=[
            build_navbar(global_config),

            # Page-level stores
            dcc.Store(id=IDs.Store.MOUNT_ID, data=mount_id),
            dcc.Store(id=IDs.Store.QUERY_RESULT, data=QueryResult.loading(mount_id).to_dict()),
            dcc.Store(id=IDs.Store.TABLE_STATE, data=ctx.initial_table_state().to_dict()),

            dbc.Row(
                dbc.Col(
                    build_table_panel(
                        global_config.page_size_options,
                        global_config.default_page_size,
                    ),
                    md=12,
                    className="mt-3",
                ),
                className="gx-3",
            ),
        ],
    )
