"""ABOUTME: Unit tests for authfactors configuration module
ABOUTME: Tests environment variable loading for the recovery code policy and logging"""

import logging
from typing import ClassVar

import pytest

from authfactors.config import (
    RECOVERY_CODE_COUNT,
    InvalidConfig,
    RecoveryCodeCfg,
    get_log_level,
    is_development,
    should_log_debug_events,
    to_bool,
)


class TestToBool:
    test_values: ClassVar = [
        ("true", True),
        ("True", True),
        ("TRUE", True),
        ("false", False),
        ("False", False),
        ("1", True),
        ("0", False),
        ("yes", True),
        ("no", False),
        ("on", True),
        ("off", False),
        ("", False),
        (None, False),
        ("  true  ", True),  # Test whitespace handling
    ]

    @pytest.mark.parametrize("bool_str,expected", test_values)
    def test_to_bool(self, bool_str: str, expected: bool):
        assert to_bool(bool_str) == expected

    def test_to_bool_raises_on_bad_value(self):
        with pytest.raises(ValueError, match="LOG_DEBUG_EVENTS=maybe"):
            to_bool("maybe", context_str="LOG_DEBUG_EVENTS=")


class TestRecoveryCodeCfg:
    def test_default_pool_size(self):
        assert RecoveryCodeCfg().pool_size == RECOVERY_CODE_COUNT == 4

    def test_from_env_defaults(self, clear_env_vars):
        clear_env_vars("RECOVERY_CODE_COUNT")

        assert RecoveryCodeCfg.from_env().pool_size == 4

    def test_from_env_reads_count(self, temp_env_vars):
        temp_env_vars(RECOVERY_CODE_COUNT="8")

        assert RecoveryCodeCfg.from_env().pool_size == 8

    def test_from_env_rejects_non_integer(self, temp_env_vars):
        temp_env_vars(RECOVERY_CODE_COUNT="lots")

        with pytest.raises(InvalidConfig, match="RECOVERY_CODE_COUNT must be an integer"):
            RecoveryCodeCfg.from_env()

    @pytest.mark.parametrize("pool_size", [0, -1])
    def test_rejects_non_positive_pool_size(self, pool_size):
        with pytest.raises(InvalidConfig, match="must be positive"):
            RecoveryCodeCfg(pool_size=pool_size)


class TestLoggingSettings:
    def test_log_level_default(self, clear_env_vars):
        clear_env_vars("LOG_LEVEL")

        assert get_log_level() == logging.INFO

    def test_log_level_from_env(self, temp_env_vars):
        temp_env_vars(LOG_LEVEL="debug")

        assert get_log_level() == logging.DEBUG

    def test_log_level_rejects_unknown(self, temp_env_vars):
        temp_env_vars(LOG_LEVEL="chatty")

        with pytest.raises(InvalidConfig, match="LOG_LEVEL"):
            get_log_level()

    @pytest.mark.parametrize("app_env,expected", [("development", True), ("dev", True), ("production", False)])
    def test_is_development(self, temp_env_vars, app_env, expected):
        temp_env_vars(APP_ENV=app_env)

        assert is_development() is expected

    def test_debug_events_off_by_default(self, clear_env_vars):
        clear_env_vars("LOG_DEBUG_EVENTS")

        assert should_log_debug_events() is False
