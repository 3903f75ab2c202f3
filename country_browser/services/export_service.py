from __future__ import annotations

import io
import logging
from typing import Any, Dict, List, Sequence

import pandas as pd
from dash import dcc

from country_browser.config.model import XLSX_MIME_TYPE
from country_browser.core.country import Country
from country_browser.core.exceptions import ExportError

logger = logging.getLogger(__name__)

EXPORT_HEADER: List[str] = ["Name", "Capital", "Currency", "Languages", "Native"]


def build_export_frame(countries: Sequence[Country]) -> pd.DataFrame:
    """
    One row per country, columns in EXPORT_HEADER order.
    Missing capital/currency become empty cells.
    """
    rows = [
        [c.name, c.capital or "", c.currency or "", c.language_names, c.native]
        for c in countries
    ]
    return pd.DataFrame(rows, columns=EXPORT_HEADER)


class ExportService:
    """
    Serialises the filtered + sorted rows (every matching row, not just the
    visible page) to an xlsx workbook and wraps it for dcc.Download.
    """

    def __init__(self, filename: str = "Countries.xlsx", sheet_name: str = "Countries"):
        self.filename = filename
        self.sheet_name = sheet_name

    def write_xlsx(self, countries: Sequence[Country], buffer: io.BytesIO) -> None:
        frame = build_export_frame(countries)
        try:
            with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
                frame.to_excel(writer, sheet_name=self.sheet_name, index=False)
        except (ValueError, OSError) as e:
            raise ExportError(f"Could not write {self.filename}: {e}") from e

    def to_xlsx_bytes(self, countries: Sequence[Country]) -> bytes:
        with io.BytesIO() as buffer:
            self.write_xlsx(countries, buffer)
            data = buffer.getvalue()

        logger.info(
            "Exported countries",
            extra={"filename": self.filename, "n_rows": len(countries), "n_bytes": len(data)},
        )
        return data

    def download(self, countries: Sequence[Country]) -> Dict[str, Any]:
        """Payload for dcc.Download; the browser side revokes its object URL itself."""
        return dcc.send_bytes(self.to_xlsx_bytes(countries), self.filename, type=XLSX_MIME_TYPE)
