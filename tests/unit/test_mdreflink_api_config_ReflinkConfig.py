"""Unit tests for mdreflink.api.config.ReflinkConfig."""

import pytest
from pydantic import ValidationError

from mdreflink.api.config import ReflinkConfig, ReflinkConfigError

pytestmark = pytest.mark.config


class TestReflinkConfig:
    """Test ReflinkConfig model."""

    def test_defaults(self):
        assert ReflinkConfig().column_width is None

    def test_column_width(self):
        assert ReflinkConfig(column_width=80).column_width == 80

    @pytest.mark.parametrize("width", [0, -5])
    def test_column_width_must_be_positive(self, width):
        with pytest.raises(ValidationError):
            ReflinkConfig(column_width=width)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            ReflinkConfig(columnWidth=80)

    def test_from_config_dict(self):
        assert ReflinkConfig.from_config_dict({"column_width": 72}).column_width == 72
        assert ReflinkConfig.from_config_dict({}).column_width is None

    def test_from_config_dict_collects_errors(self):
        with pytest.raises(ReflinkConfigError) as exc_info:
            ReflinkConfig.from_config_dict({"column_width": 0, "extra": 1})
        assert len(exc_info.value.errors) == 2
        assert any(error.startswith("column_width:") for error in exc_info.value.errors)
        assert any(error.startswith("extra:") for error in exc_info.value.errors)


class TestReflinkConfigError:
    """Test ReflinkConfigError exception."""

    def test_message_lists_errors(self):
        error = ReflinkConfigError(["column_width: too small", "extra: not permitted"])
        assert str(error) == "Invalid reflink options (2):\n  - column_width: too small\n  - extra: not permitted"

    def test_is_value_error(self):
        assert isinstance(ReflinkConfigError(["x: bad"]), ValueError)

    def test_from_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            ReflinkConfig(column_width=-1)
        error = ReflinkConfigError.from_validation_error(exc_info.value)
        assert error.errors == ["column_width: Input should be greater than 0"]
