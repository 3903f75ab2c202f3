from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from country_browser.config.model import GlobalConfig
from country_browser.core.table_state import TableState
from country_browser.services.country_query import CountryQueryClient
from country_browser.services.export_service import ExportService


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig

    query_client: Optional[CountryQueryClient] = None
    export_service: Optional[ExportService] = None

    def initial_table_state(self) -> TableState:
        return TableState.initial(
            page_size=self.global_config.default_page_size,
            page_size_options=self.global_config.page_size_options,
        )

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.query_client is None:
            raise RuntimeError("AppConfig.query_client must be initialized.")
        if self.export_service is None:
            raise RuntimeError("AppConfig.export_service must be initialized.")
