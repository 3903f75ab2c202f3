import logging
import os
import socket

from country_browser.logging_config import configure_logging
from country_browser.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger("country_browser.app")

CONFIG_ROOT = os.getenv("COUNTRY_BROWSER_CONFIG", "config")

app = create_dash_app(CONFIG_ROOT)
# WSGI entrypoint, e.g. `gunicorn app:server`
server = app.server


def find_free_port(start_port: int, attempts: int = 100) -> int:
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


def main() -> None:
    preferred_port = int(os.getenv("PORT", "8051"))
    port = find_free_port(preferred_port)
    debug = os.getenv("DEBUG", "0") == "1"

    if port != preferred_port:
        logger.warning(
            "Preferred port taken, using next free port",
            extra={"preferred_port": preferred_port, "port": port},
        )
    logger.info("Starting country browser", extra={"port": port, "config_root": CONFIG_ROOT, "debug": debug})

    app.run(host="0.0.0.0", port=port, debug=debug)


if __name__ == "__main__":
    main()
