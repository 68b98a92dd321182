#!filepath: datekit/__init__.py

from .utils.logger import Logging, logs, init_logging
from .utils.errors import UserInputError
from .utils.datetime_utils import DateTimeUtils
from .config.app_config import AppConfig, init_config

__version__ = "0.1.0"

datetime_utils = DateTimeUtils

# alias 简化调用
parse_rfc2822 = DateTimeUtils.parse_rfc2822
parse_iso8601 = DateTimeUtils.parse_iso8601
is_leap_year = DateTimeUtils.is_leap_year
time_span_to_string = DateTimeUtils.time_span_to_string
angle_between_clock_hands = DateTimeUtils.angle_between_clock_hands
is_valid = DateTimeUtils.is_valid

__all__ = [
    "logs", "Logging", "init_logging",
    "UserInputError",
    "AppConfig", "init_config",
    "datetime_utils", "DateTimeUtils",
    "parse_rfc2822", "parse_iso8601",
    "is_leap_year", "time_span_to_string",
    "angle_between_clock_hands", "is_valid",
]
