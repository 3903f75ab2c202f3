from __future__ import annotations

import json

from country_browser.config.model import GlobalConfig
from country_browser.services.country_query import QueryResult
from country_browser.ui.config import AppConfig
from country_browser.ui.dash_app import create_dash_app
from country_browser.ui.ids import IDs
from country_browser.ui.layout.build_layout import build_layout


def _find(layout, component_id):
    for component in layout._traverse():
        if getattr(component, "id", None) == component_id:
            return component
    return None


def test_layout_tags_initial_result_with_mount_id(tmp_path):
    ctx = AppConfig(config_root=tmp_path, global_config=GlobalConfig())

    layout = build_layout(ctx)

    mount_id = _find(layout, IDs.Store.MOUNT_ID).data
    result = QueryResult.from_dict(_find(layout, IDs.Store.QUERY_RESULT).data)

    assert result.belongs_to(mount_id)
    assert not result.is_ready


def test_each_page_load_gets_a_fresh_mount_id(tmp_path):
    ctx = AppConfig(config_root=tmp_path, global_config=GlobalConfig())

    first = _find(build_layout(ctx), IDs.Store.MOUNT_ID).data
    second = _find(build_layout(ctx), IDs.Store.MOUNT_ID).data

    assert first != second


def test_page_size_dropdown_offers_configured_sizes(tmp_path):
    ctx = AppConfig(config_root=tmp_path, global_config=GlobalConfig())

    dropdown = _find(build_layout(ctx), IDs.Control.PAGE_SIZE_SELECT)

    assert [o["value"] for o in dropdown.options] == [5, 10, 25, 50, 100, 251]
    assert dropdown.value == 5


def test_create_dash_app_from_config_dir(tmp_path):
    (tmp_path / "global.json").write_text(json.dumps({"ui_title": "Test Countries"}))

    app = create_dash_app(tmp_path)

    assert app.title == "Test Countries"
    assert callable(app.layout)
