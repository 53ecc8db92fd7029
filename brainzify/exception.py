"""
Core exceptions for the entire package.
"""
from collections.abc import Iterable
from typing import Any


class BrainzifyError(Exception):
    """Generic base class for all Brainzify-related errors"""


class BrainzifyKeyError(BrainzifyError, KeyError):
    """Exception raised for invalid keys."""


class BrainzifyValueError(BrainzifyError, ValueError):
    """Exception raised for invalid values."""


###########################################################################
## Config errors
###########################################################################
class ConfigError(BrainzifyError):
    """
    Exception raised when processing config gives an exception.

    :param message: Explanation of the error.
    :param key: The key that caused the error.
    :param value: The value that caused the error.
    """
    def __init__(self, message: str = "Could not process config", key: Any | None = None, value: Any | None = None):
        suffix = []

        key = "->".join(key) if isinstance(key, Iterable) and not isinstance(key, str) else key
        if key and "{key}" in message:
            message = message.replace("{key}", str(key))
        elif key:
            suffix.append(f"key='{key}'")

        if value and "{value}" in message:
            message = message.replace("{value}", str(value))
        elif value:
            suffix.append(f"value='{value}'")

        self.key = key
        self.value = value
        self.message = message
        super().__init__(" | ".join([message, *suffix]) if suffix else message)
