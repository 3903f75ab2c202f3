from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from country_browser.core.country import COLUMNS
from country_browser.ui.ids import IDs, filter_input_id


def build_filter_bar() -> dbc.CardBody:
    """
    One free-text filter per column plus the export trigger.
    """
    inputs = [
        dbc.Col(
            dbc.Input(
                id=filter_input_id(col.id),
                type="text",
                size="sm",
                placeholder=col.label,
                value="",
                debounce=True,
            ),
            xs=12,
            md=True,
            className="mb-2 mb-md-0",
        )
        for col in COLUMNS
    ]

    return dbc.CardBody(
        dbc.Row(
            [
                *inputs,
                dbc.Col(
                    html.Div(
                        [
                            dbc.Button(
                                "Export to Excel",
                                id=IDs.Control.EXPORT_BTN,
                                color="success",
                                size="sm",
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD_XLSX),
                        ],
                        className="d-flex justify-content-end",
                    ),
                    xs=12,
                    md="auto",
                ),
            ],
            className="g-2 align-items-center",
        ),
        className="p-2",
    )
