"""Custom errors with tracking context."""

from utils.timestamp import format_timestamp


class BaseIdError(Exception):
    """Base error with timestamp and context for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        if not self.context:
            return super().__str__()
        details = " ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{super().__str__()} ({details})"


class ConfigError(BaseIdError, ValueError):
    """Generator options rejected at construction."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        context["value"] = value
        super().__init__(message, context=context, **kwargs)


class InvalidBase(ConfigError):
    """Base is neither 36 nor 62."""


class InvalidLength(ConfigError):
    """Suffix length is not an integer between 0 and 20."""


class InvalidPrecision(ConfigError):
    """Precision is neither seconds nor milliseconds."""


class InvalidMaxAttempts(ConfigError):
    """Batch attempt cap is not a positive integer."""


class InvalidCount(BaseIdError, ValueError):
    """Batch count is not an integer of at least 2."""

    def __init__(self, message, count=None, **kwargs):
        context = kwargs.pop("context", {})
        context["count"] = count
        super().__init__(message, context=context, **kwargs)


class BatchExhausted(BaseIdError, RuntimeError):
    """Batch attempt cap reached before enough distinct ids were produced."""

    def __init__(self, message, count=None, attempts=None, distinct=None, **kwargs):
        context = kwargs.pop("context", {})
        context.update(count=count, attempts=attempts, distinct=distinct)
        super().__init__(message, context=context, **kwargs)


class InvalidCharacter(BaseIdError, ValueError):
    """Decoded text holds a character outside the alphabet."""

    def __init__(self, message, char=None, base=None, **kwargs):
        context = kwargs.pop("context", {})
        if char is not None:
            context["char"] = char
        if base is not None:
            context["base"] = base
        super().__init__(message, context=context, **kwargs)
