"""Resilience – failure kinds and the is-a relation used for classification.

A :class:`FailureKind` is a value object naming a category of failure.  Kinds
form a hierarchy through ``parents``; ``a.is_a(b)`` holds when ``a`` equals
``b`` or one of its ancestors does.  Every kind is-a :data:`ANY_FAILURE`.

Python exception classes map onto kinds through their bases, so
``kind_for_type(asyncio.TimeoutError).is_a(kind_for_type(OSError))`` mirrors
``issubclass``.  Errors that carry an explicit ``failure_kind`` attribute
(see :class:`~breaker_commons.kernel.errors.KindedError`) are classified by
that kind instead.
"""
from __future__ import annotations

import builtins
import dataclasses
import functools
import importlib
from typing import Mapping, Union

from breaker_commons.config.validation import InvalidSettingValueError

ANY_FAILURE_NAME = "AnyFailure"


@dataclasses.dataclass(frozen=True)
class FailureKind:
    """A node in the failure-kind hierarchy."""

    name: str
    parents: tuple[FailureKind, ...] = ()

    def is_a(self, other: FailureKind) -> bool:
        """Return ``True`` if an occurrence of this kind also qualifies as *other*."""
        if other == ANY_FAILURE or self == other:
            return True
        return any(parent.is_a(other) for parent in self.parents)

    def child(self, name: str) -> FailureKind:
        """Declare a kind more specific than this one."""
        return FailureKind(name, (self,))

    def __repr__(self) -> str:
        return f"FailureKind({self.name!r})"


ANY_FAILURE = FailureKind(ANY_FAILURE_NAME)

KindSpec = Union[FailureKind, type[BaseException]]


@functools.lru_cache(maxsize=1024)
def kind_for_type(exc_type: type[BaseException]) -> FailureKind:
    """Derive the kind of an exception class from its base classes."""
    if exc_type is BaseException:
        return ANY_FAILURE
    parents = tuple(
        kind_for_type(base)
        for base in exc_type.__bases__
        if isinstance(base, type) and issubclass(base, BaseException)
    )
    module = exc_type.__module__
    name = exc_type.__qualname__ if module == "builtins" else f"{module}.{exc_type.__qualname__}"
    return FailureKind(name, parents)


def kind_of(failure: BaseException) -> FailureKind:
    """Return the kind a failure is classified as."""
    explicit = getattr(failure, "failure_kind", None)
    if isinstance(explicit, FailureKind):
        return explicit
    return kind_for_type(type(failure))


def as_kind(spec: KindSpec) -> FailureKind:
    """Normalise a kind given either as a :class:`FailureKind` or an exception class."""
    if isinstance(spec, FailureKind):
        return spec
    if isinstance(spec, type) and issubclass(spec, BaseException):
        return kind_for_type(spec)
    raise TypeError(f"Expected a FailureKind or an exception class, got {spec!r}")


def resolve_kind(name: str, registry: Mapping[str, FailureKind] | None = None) -> FailureKind:
    """Resolve a configured kind name.

    Lookup order: ``"AnyFailure"``, *registry*, builtin exception names, then
    dotted import paths such as ``"http.client.RemoteDisconnected"``.
    """
    name = name.strip()
    if name == ANY_FAILURE_NAME:
        return ANY_FAILURE
    if registry is not None and name in registry:
        return registry[name]

    if "." in name:
        module_name, _, attr = name.rpartition(".")
        try:
            target = getattr(importlib.import_module(module_name), attr)
        except (ImportError, AttributeError) as exc:
            raise InvalidSettingValueError("failure_kind", name, f"cannot import: {exc}") from exc
    else:
        target = getattr(builtins, name, None)

    if not (isinstance(target, type) and issubclass(target, BaseException)):
        raise InvalidSettingValueError("failure_kind", name, "not a known failure kind or exception class")
    return kind_for_type(target)


__all__ = [
    "ANY_FAILURE",
    "FailureKind",
    "KindSpec",
    "as_kind",
    "kind_for_type",
    "kind_of",
    "resolve_kind",
]
