from __future__ import annotations

__all__ = ["IDs", "filter_input_id", "sort_header_id"]


class IDs:
    class Store:
        MOUNT_ID = "mount-id"
        QUERY_RESULT = "query-result"
        TABLE_STATE = "table-state"

    class Control:
        # Filters + export
        EXPORT_BTN = "export-btn"
        DOWNLOAD_XLSX = "download-xlsx"

        # Status bar
        STATUS_BAR = "status-bar"
        ROW_COUNT = "row-count"

        # Table
        TABLE_BODY = "table-body"

        # Pagination
        PAGINATION = "pagination"
        PAGE_SIZE_SELECT = "page-size-select"

    class Pattern:
        # pattern-matching "type" strings
        FILTER_INPUT = "column-filter"
        SORT_HEADER = "sort-header"


def filter_input_id(column: str) -> dict:
    return {"type": IDs.Pattern.FILTER_INPUT, "index": column}


def sort_header_id(column: str) -> dict:
    return {"type": IDs.Pattern.SORT_HEADER, "index": column}
