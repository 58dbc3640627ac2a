"""Tests for configuration management."""

from pathlib import Path

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    _convert_value,
    get_environment,
    get_environment_info,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("CONDUCTOR_SWEEP_STEP", raising=False)
        assert get_environment(EnvVar.CONDUCTOR_SWEEP_STEP) == 50

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("CONDUCTOR_SWEEP_STEP", "99")
        assert get_environment(EnvVar.CONDUCTOR_SWEEP_STEP, override=5) == 5

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("CONDUCTOR_SWEEP_STEP", "20")
        result = get_environment(EnvVar.CONDUCTOR_SWEEP_STEP)
        assert result == 20
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_invalid_int_falls_back_to_default(self, monkeypatch):
        """Unparseable integers fall back to the default."""
        monkeypatch.setenv("CONDUCTOR_SWEEP_STEP", "wide")
        assert get_environment(EnvVar.CONDUCTOR_SWEEP_STEP) == 50

    @pytest.mark.unit
    def test_bool_type_conversion_true(self, monkeypatch):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            monkeypatch.setenv("CONDUCTOR_VALIDATE", value)
            assert get_environment(EnvVar.CONDUCTOR_VALIDATE) is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self, monkeypatch):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No"):
            monkeypatch.setenv("CONDUCTOR_VALIDATE", value)
            assert get_environment(EnvVar.CONDUCTOR_VALIDATE) is False

    @pytest.mark.unit
    def test_unrecognized_bool_uses_default(self, monkeypatch):
        """Unrecognized boolean strings use the default."""
        monkeypatch.setenv("CONDUCTOR_VALIDATE", "maybe")
        assert get_environment(EnvVar.CONDUCTOR_VALIDATE) is False

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("CONDUCTOR_LOG_LEVEL", "DEBUG")
        assert get_environment(EnvVar.CONDUCTOR_LOG_LEVEL) == "DEBUG"


class TestConvertValue:
    """Tests for the raw conversion helper."""

    @pytest.mark.unit
    def test_none_returns_default(self):
        assert _convert_value(None, int, 7) == 7

    @pytest.mark.unit
    def test_path_type_conversion(self, tmp_path):
        result = _convert_value(str(tmp_path), Path, None)
        assert isinstance(result, Path)
        assert result == tmp_path

    @pytest.mark.unit
    def test_unknown_type_passthrough(self):
        assert _convert_value("x", float, None) == "x"


class TestIntrospection:
    """Tests for metadata and listing helpers."""

    @pytest.mark.unit
    def test_environment_info(self):
        """Metadata is exposed as EnvConfig."""
        info = get_environment_info(EnvVar.CONDUCTOR_VALIDATE)
        assert isinstance(info, EnvConfig)
        assert info.name == "CONDUCTOR_VALIDATE"
        assert info.var_type is bool

    @pytest.mark.unit
    def test_every_variable_has_description(self):
        for var in EnvVar:
            assert var.value.description, f"{var} missing description"

    @pytest.mark.unit
    def test_list_all(self):
        assert list_environment_variables() == list(EnvVar)

    @pytest.mark.unit
    def test_list_by_category(self):
        resolver_vars = list_environment_variables("resolver")
        assert EnvVar.CONDUCTOR_VALIDATE in resolver_vars
        assert EnvVar.CONDUCTOR_LOG_LEVEL not in resolver_vars
        assert list_environment_variables("missing") == []
