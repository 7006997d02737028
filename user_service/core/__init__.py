"""Core: config, lifespan, and exception handlers."""

from user_service.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
