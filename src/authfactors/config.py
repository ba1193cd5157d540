"""ABOUTME: Configuration management for the authfactors domain core
ABOUTME: Loads environment variables and provides the recovery code pool policy"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

# the reference policy for how many recovery codes a user holds at once
RECOVERY_CODE_COUNT = 4
RECOVERY_CODE_LENGTH = 16


class InvalidConfig(Exception):
    """Error for when the config is not valid"""


def to_bool(value: str | None, context_str: str = "") -> bool:
    """
    Convert string to boolean. Valid options (after stripping whitespace and making lower-case)
    - False: "false", "no", "off", "0", None, ""
    - True: "true", "yes", "on", "1"

    The `context_str` is there for the error message, to help find the issue.
    """
    if value is None:
        return False
    value = value.lower().strip()
    if value in ("false", "no", "off", "0", ""):
        return False
    if value in ("true", "yes", "on", "1"):
        return True
    raise ValueError(
        f"Cannot convert '{context_str}{value}' to boolean. Valid values are: true/false, 1/0, yes/no, on/off (case-insensitive)"
    )


@dataclass(slots=True, kw_only=True, frozen=True)
class RecoveryCodeCfg:
    pool_size: int = RECOVERY_CODE_COUNT

    def __post_init__(self) -> None:
        if self.pool_size <= 0:
            raise InvalidConfig(f"Recovery code pool size must be positive, got {self.pool_size}")

    @classmethod
    def from_env(cls) -> "RecoveryCodeCfg":
        raw_count = os.environ.get("RECOVERY_CODE_COUNT", str(RECOVERY_CODE_COUNT)).strip()
        try:
            pool_size = int(raw_count)
        except ValueError as error:
            raise InvalidConfig(f"RECOVERY_CODE_COUNT must be an integer (got {raw_count!r})") from error
        return RecoveryCodeCfg(pool_size=pool_size)


def get_app_env() -> str:
    return os.environ.get("APP_ENV", "production").lower().strip()


def is_development() -> bool:
    return get_app_env() in ("development", "dev")


def get_log_level() -> int:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper().strip()
    # getLevelName maps known names to ints and returns a string for unknown ones
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise InvalidConfig(f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL (got {level_name!r})")
    return level


def should_log_debug_events() -> bool:
    return to_bool(os.environ.get("LOG_DEBUG_EVENTS"), context_str="LOG_DEBUG_EVENTS=")
