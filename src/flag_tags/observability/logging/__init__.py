"""Observability – structlog configuration and logger helpers."""
from flag_tags.observability.logging.factory import configure_logging
from flag_tags.observability.logging.processors import get_logger

__all__ = ["configure_logging", "get_logger"]
