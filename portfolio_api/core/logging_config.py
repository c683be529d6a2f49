"""Logging setup shared by the app factory and the CLI entrypoint."""

import logging

from portfolio_api.core.config import resolve_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once; later calls only adjust the level."""
    level_name = level or resolve_log_level()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(level_name)
