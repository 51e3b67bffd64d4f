"""Observability – structured logging."""
from flag_tags.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
