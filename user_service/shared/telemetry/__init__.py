"""Shared telemetry: logging setup."""

from user_service.shared.telemetry.logging import setup_logging

__all__ = [
    "setup_logging",
]
