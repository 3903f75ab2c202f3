from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from country_browser.core.table_state import DEFAULT_PAGE_SIZE_OPTIONS

DEFAULT_ENDPOINT = "https://countries.trevorblades.com/graphql"
XLSX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@dataclass
class GlobalConfig:
    ui_title: str = "Countries"
    subtitle: str = "Sort, filter and export the world's countries"
    endpoint: str = DEFAULT_ENDPOINT
    request_timeout: float = 10.0
    cache_results: bool = False
    page_size_options: Tuple[int, ...] = field(default=DEFAULT_PAGE_SIZE_OPTIONS)
    default_page_size: int = 5
    export_filename: str = "Countries.xlsx"
    export_sheet_name: str = "Countries"
