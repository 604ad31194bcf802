"""Tests for ms_common.config.env parsing utilities."""

import pytest

from ms_common.config.env import parse_bool_env


pytestmark = pytest.mark.unit_common


class TestParseBoolEnv:
    def test_returns_none_for_none(self) -> None:
        assert parse_bool_env(None) is None

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on", "  on  "])
    def test_truthy(self, value: str) -> None:
        assert parse_bool_env(value) is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "off", "random", ""])
    def test_falsy(self, value: str) -> None:
        assert parse_bool_env(value) is False
