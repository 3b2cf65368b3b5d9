"""Unit tests for the kernel error root."""
from __future__ import annotations

import json

from mp_logging.config import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from mp_logging.kernel import BaseError


class TestBaseError:
    def test_defaults(self) -> None:
        err = BaseError("something broke")
        assert err.message == "something broke"
        assert err.code == "logging_error"
        assert err.detail == {}
        assert err.cause is None

    def test_str_is_json(self) -> None:
        err = BaseError("x", code="custom", detail={"k": 1})
        assert json.loads(str(err)) == {"code": "custom", "message": "x", "detail": {"k": 1}}

    def test_cause_is_chained(self) -> None:
        cause = OSError("disk")
        err = BaseError("wrapped", cause=cause)
        assert err.__cause__ is cause
        assert json.loads(str(err))["cause"] == repr(cause)

    def test_repr(self) -> None:
        assert repr(BaseError("x")) == "BaseError(code='logging_error', message='x')"


class TestConfigErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(ConfigError, BaseError)
        assert issubclass(MissingRequiredSettingError, ConfigError)
        assert issubclass(InvalidSettingValueError, ConfigError)

    def test_missing_setting(self) -> None:
        err = MissingRequiredSettingError("MP_LOGGING_X")
        assert err.setting_name == "MP_LOGGING_X"
        assert err.code == "missing_required_setting"
        assert "MP_LOGGING_X" in err.message

    def test_invalid_value(self) -> None:
        err = InvalidSettingValueError("console_level", "loud", "unknown severity")
        assert err.code == "invalid_setting_value"
        assert err.value == "loud"
        assert err.reason == "unknown severity"
        assert err.detail == {"setting": "console_level", "value": "'loud'"}
