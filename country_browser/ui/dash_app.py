from __future__ import annotations

import logging
from functools import partial
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from country_browser.config.loader import load_global_config
from country_browser.services.country_query import CountryQueryClient
from country_browser.services.export_service import ExportService
from country_browser.ui.layout.build_layout import build_layout
from country_browser.ui.callbacks.callbacks_query import register_query_callbacks
from country_browser.ui.callbacks.callbacks_table import register_table_callbacks
from country_browser.ui.callbacks.callbacks_export import register_export_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Services
    query_client = CountryQueryClient(
        endpoint=global_config.endpoint,
        timeout=global_config.request_timeout,
        cache_results=global_config.cache_results,
    )
    export_service = ExportService(
        filename=global_config.export_filename,
        sheet_name=global_config.export_sheet_name,
    )

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        query_client=query_client,
        export_service=export_service,
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title

    # A function layout is rebuilt per page load -> fresh mount token
    app.layout = partial(build_layout, ctx)

    register_query_callbacks(app, ctx)
    register_table_callbacks(app, ctx)
    register_export_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "endpoint": global_config.endpoint},
    )
    return app
