"""Tests for environment variable helpers."""

import pytest

from perf_timer.utils.env_utils import parse_bool_env, parse_str_env


class TestParseBoolEnv:
    """Tests for parse_bool_env."""

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on", " True "])
    def test_truthy(self, monkeypatch, value):
        """Test truthy spellings parse as True."""
        monkeypatch.setenv("PERF_TIMER_TEST_FLAG", value)
        assert parse_bool_env("PERF_TIMER_TEST_FLAG") is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "off", "maybe"])
    def test_falsy(self, monkeypatch, value):
        """Test other values parse as False."""
        monkeypatch.setenv("PERF_TIMER_TEST_FLAG", value)
        assert parse_bool_env("PERF_TIMER_TEST_FLAG", default=True) is False

    def test_unset_uses_default(self, monkeypatch):
        """Test unset variables return the default."""
        monkeypatch.delenv("PERF_TIMER_TEST_FLAG", raising=False)
        assert parse_bool_env("PERF_TIMER_TEST_FLAG", default=True) is True

    def test_blank_uses_default(self, monkeypatch):
        """Test blank variables return the default."""
        monkeypatch.setenv("PERF_TIMER_TEST_FLAG", "  ")
        assert parse_bool_env("PERF_TIMER_TEST_FLAG", default=True) is True


class TestParseStrEnv:
    """Tests for parse_str_env."""

    def test_value_stripped(self, monkeypatch):
        """Test values are stripped of surrounding whitespace."""
        monkeypatch.setenv("PERF_TIMER_TEST_STR", " monotonic ")
        assert parse_str_env("PERF_TIMER_TEST_STR") == "monotonic"

    def test_unset_uses_default(self, monkeypatch):
        """Test unset variables return the default."""
        monkeypatch.delenv("PERF_TIMER_TEST_STR", raising=False)
        assert parse_str_env("PERF_TIMER_TEST_STR", "fallback") == "fallback"

    def test_blank_uses_default(self, monkeypatch):
        """Test blank variables return the default."""
        monkeypatch.setenv("PERF_TIMER_TEST_STR", "")
        assert parse_str_env("PERF_TIMER_TEST_STR") is None
