"""Root error class for the breaker-commons error hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from breaker_commons.resilience.circuit_breaker.kinds import FailureKind


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to class name snake_case).
        detail: Arbitrary extra context (serialisable dict).
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Return a JSON-serialisable single-line string representation."""
        import json
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging / HTTP responses)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


class KindedError(BaseError):
    """Error tagged with an explicit :class:`FailureKind`.

    Failure classification uses ``failure_kind`` instead of the Python class
    hierarchy, so one error class can represent many kinds::

        DECLINED = ANY_FAILURE.child("payments.declined")
        raise KindedError(DECLINED, "card declined")
    """

    default_code = "kinded_error"

    def __init__(self, kind: FailureKind, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"{kind.name} failure", **kwargs)
        self.failure_kind = kind

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["failure_kind"] = self.failure_kind.name
        return base


__all__ = ["BaseError", "KindedError"]
