"""Entry point for serving the Campus Marketplace API.

Host and port are read from the environment variables ``API_HOST`` and
``API_PORT``.  Defaults are ``0.0.0.0`` and ``8000``.

Usage:
    python run.py
"""
import logging
import os

from uvicorn import Config, Server

from campus_marketplace_api.app.main import app
from campus_marketplace_api.app.core.config import settings


def main() -> None:
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    # Logging is configured by create_app; uvicorn must not replace it.
    config = Config(app=app, host=host, port=port, reload=False, log_config=None)
    server = Server(config)
    logging.getLogger(__name__).info("Serving %s on %s:%s", settings.project_name, host, port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
