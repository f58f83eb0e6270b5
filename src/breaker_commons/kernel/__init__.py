"""Kernel – framework-agnostic building blocks."""

from breaker_commons.kernel.errors import ApplicationError, BaseError, KindedError

__all__ = [
    "ApplicationError",
    "BaseError",
    "KindedError",
]
