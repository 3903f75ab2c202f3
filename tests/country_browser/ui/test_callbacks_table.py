from __future__ import annotations

from country_browser.core.table_state import SortDirection, TableState
from country_browser.ui.callbacks.callbacks_table import next_table_state
from country_browser.ui.ids import IDs, filter_input_id, sort_header_id


def test_sort_header_click_toggles_sort():
    st = next_table_state(TableState(), sort_header_id("name"))
    assert st.sort.direction == SortDirection.DESC

    st = next_table_state(st, sort_header_id("capital"))
    assert st.sort.column == "capital"
    assert st.sort.direction == SortDirection.ASC


def test_filter_input_replaces_filters():
    st = next_table_state(
        TableState(),
        filter_input_id("currency"),
        filters={"name": "", "currency": "XAF", "capital": None},
    )

    assert st.filters.active() == {"currency": "XAF"}


def test_pagination_is_one_based():
    st = next_table_state(TableState(), IDs.Control.PAGINATION, active_page=3)
    assert st.page.page == 2


def test_page_size_change_resets_page():
    st = TableState().with_page(4)

    st = next_table_state(st, IDs.Control.PAGE_SIZE_SELECT, page_size=25)

    assert st.page.page == 0
    assert st.page.page_size == 25


def test_other_triggers_keep_state():
    st = TableState().with_page(1)

    assert next_table_state(st, None) == st
    assert next_table_state(st, IDs.Store.QUERY_RESULT) == st
    assert next_table_state(st, IDs.Control.PAGINATION, active_page=None) == st
