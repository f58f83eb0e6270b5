"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ConfigurationError  (config.validation)
    └── KindedError          (base.py)
"""

from breaker_commons.kernel.errors.application import ApplicationError
from breaker_commons.kernel.errors.base import BaseError, KindedError

__all__ = [
    "ApplicationError",
    "BaseError",
    "KindedError",
]
