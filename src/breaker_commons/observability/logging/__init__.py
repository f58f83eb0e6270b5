"""Observability – structured logging helpers."""
from breaker_commons.observability.logging.factory import JsonLoggerFactory

__all__ = ["JsonLoggerFactory"]
