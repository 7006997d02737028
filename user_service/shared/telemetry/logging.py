"""Logging configuration for the application."""

import logging
import sys

from user_service.core.config import get_settings


class RequestIdFilter(logging.Filter):
    """Stamp records with the current request id (see RequestIDMiddleware).

    A request_id passed through `extra` is kept.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        from user_service.middleware.request_id import get_request_id

        if not hasattr(record, "request_id"):
            record.request_id = get_request_id()
        return True


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s",
        handlers=[handler],
    )
