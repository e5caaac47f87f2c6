from utils.timestamp import now_micros, now_millis, format_timestamp
from internal.logging import get_logger, LogLevel, StructuredLogger, AsyncFileLogger
from core.errors import (
    BaseIdError,
    BatchExhausted,
    ConfigError,
    InvalidBase,
    InvalidCharacter,
    InvalidCount,
    InvalidLength,
    InvalidMaxAttempts,
    InvalidPrecision,
)

__all__ = [
    "now_micros",
    "now_millis",
    "format_timestamp",
    "get_logger",
    "LogLevel",
    "StructuredLogger",
    "AsyncFileLogger",
    "BaseIdError",
    "BatchExhausted",
    "ConfigError",
    "InvalidBase",
    "InvalidCharacter",
    "InvalidCount",
    "InvalidLength",
    "InvalidMaxAttempts",
    "InvalidPrecision",
]
