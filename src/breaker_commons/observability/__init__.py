"""Observability – logging."""

from breaker_commons.observability.logging import JsonLoggerFactory

__all__ = ["JsonLoggerFactory"]
