"""
breaker_commons – failure classification for circuit breakers.

Import path convention::

    from breaker_commons.resilience.circuit_breaker import FailureClassifier
    from breaker_commons.kernel.time import FrozenClock, TimeUnit
    from breaker_commons.config.validation import ConfigurationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
