"""Unit tests for kernel error hierarchy and classification signals."""

from __future__ import annotations

import json

from breaker_commons.config.validation import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from breaker_commons.kernel.errors import ApplicationError, BaseError
from breaker_commons.kernel.time import TimeUnit
from breaker_commons.resilience.circuit_breaker import (
    ANY_FAILURE,
    BreakerShouldStayClosed,
    ShadowedTripKindError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops")))
        assert parsed["code"] == "oops"

    def test_repr(self) -> None:
        assert repr(ApplicationError("m")) == "ApplicationError(code='application_error', message='m')"


class TestConfigurationErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(ConfigurationError, ApplicationError)
        assert issubclass(ShadowedTripKindError, ConfigurationError)
        assert issubclass(InvalidSettingValueError, ConfigurationError)
        assert issubclass(MissingRequiredSettingError, ConfigurationError)

    def test_shadowed_trip_kind_details(self) -> None:
        timeout = ANY_FAILURE.child("timeout")
        read_timeout = timeout.child("timeout.read")
        err = ShadowedTripKindError(read_timeout, timeout)
        assert err.code == "shadowed_trip_kind"
        assert "timeout.read" in err.message
        d = err.to_dict()
        assert d["trip_kind"] == "timeout.read"
        assert d["ignore_kind"] == "timeout"

    def test_invalid_setting_value(self) -> None:
        err = InvalidSettingValueError("unit", "weeks", "unknown")
        assert err.setting_name == "unit"
        assert "weeks" in err.message


class TestBreakerShouldStayClosed:
    def test_wraps_failure(self) -> None:
        failure = ValueError("bad")
        signal = BreakerShouldStayClosed(failure)
        assert signal.failure is failure
        assert signal.__cause__ is failure
        assert "ValueError" in str(signal)

    def test_is_not_a_base_error(self) -> None:
        assert not issubclass(BreakerShouldStayClosed, BaseError)


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        import importlib

        for module in (
            "breaker_commons.kernel",
            "breaker_commons.kernel.errors",
            "breaker_commons.kernel.time",
            "breaker_commons.config",
            "breaker_commons.resilience",
            "breaker_commons.resilience.circuit_breaker",
            "breaker_commons.observability",
        ):
            mod = importlib.import_module(module)
            for name in mod.__all__:
                assert hasattr(mod, name), f"{module}.{name!r} missing"

    def test_time_unit_is_str_enum(self) -> None:
        assert TimeUnit.SECONDS == "SECONDS"
