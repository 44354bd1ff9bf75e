"""Logging configuration for the application."""

import logging
import sys

from lawdesk.core.config import get_settings
from lawdesk.core.firm_context import get_firm_id

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [firm=%(firm_id)s] %(message)s"


class FirmContextFilter(logging.Filter):
    """Stamp each record with the firm_id of the request being served ("-" outside requests)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.firm_id = get_firm_id() or "-"
        return True


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout. Idempotent: calling twice does not add handlers.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(FirmContextFilter())
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[handler],
    )

