from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from country_browser.config.model import GlobalConfig
from country_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def _parse_page_sizes(raw: Any) -> tuple[int, ...]:
    if not isinstance(raw, list) or not raw:
        raise ConfigError("'page_size_options' must be a non-empty list of integers")
    try:
        sizes = tuple(int(v) for v in raw)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"'page_size_options' must contain integers: {e}") from e
    if any(s <= 0 for s in sizes):
        raise ConfigError("'page_size_options' must contain positive integers")
    return sizes


def config_from_dict(raw: Dict[str, Any]) -> GlobalConfig:
    """
    Build a GlobalConfig from the parsed global.json, filling in defaults
    for anything not set.

    :raises ConfigError: if the page size setup is inconsistent
    """
    defaults = GlobalConfig()

    page_sizes = (
        _parse_page_sizes(raw["page_size_options"])
        if "page_size_options" in raw
        else defaults.page_size_options
    )
    default_page_size = int(raw.get("default_page_size", page_sizes[0]))
    if default_page_size not in page_sizes:
        raise ConfigError(
            f"default_page_size {default_page_size} is not one of {list(page_sizes)}"
        )

    return GlobalConfig(
        ui_title=raw.get("ui_title", defaults.ui_title),
        subtitle=raw.get("subtitle", defaults.subtitle),
        endpoint=raw.get("endpoint", defaults.endpoint),
        request_timeout=float(raw.get("request_timeout", defaults.request_timeout)),
        cache_results=bool(raw.get("cache_results", defaults.cache_results)),
        page_size_options=page_sizes,
        default_page_size=default_page_size,
        export_filename=raw.get("export_filename", defaults.export_filename),
        export_sheet_name=raw.get("export_sheet_name", defaults.export_sheet_name),
    )


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            global.json

    A missing global.json is not an error: the defaults point at the
    public countries endpoint.

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises ConfigError: if global.json is not valid JSON or not an object.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        logger.warning(
            "No global.json found, using defaults",
            extra={"config_root": str(root)},
        )
        return GlobalConfig()

    try:
        with global_path.open() as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    return config_from_dict(raw)
