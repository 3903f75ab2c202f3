from .country_query import (
    COUNTRIES_QUERY,
    CountryQueryClient,
    QueryResult,
    QueryStatus,
    new_mount_id,
    run_country_query,
)
from .export_service import EXPORT_HEADER, ExportService, build_export_frame

__all__ = [
    "COUNTRIES_QUERY",
    "CountryQueryClient",
    "QueryResult",
    "QueryStatus",
    "new_mount_id",
    "run_country_query",
    "EXPORT_HEADER",
    "ExportService",
    "build_export_frame",
]
