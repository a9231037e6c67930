"""Custom exceptions.

Classifies failures raised while configuring a cache or driving it from the CLI.
A missing key is never an error.
"""

from __future__ import annotations


class CacheError(Exception):
    """Base class for cache related errors"""


class ConfigurationError(CacheError, ValueError):
    """Configuration error

    Raised when a cache is constructed with an invalid capacity or when
    environment variables cannot be parsed.
    """


class OperationParseError(CacheError):
    """Replay script parse error

    Raised when a line of an operation script cannot be understood.
    """

    def __init__(self, line_number: int, message: str) -> None:
        self.line_number = line_number
        super().__init__(f"[line {line_number}] {message}")
