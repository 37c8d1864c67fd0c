"""Errors raised by :mod:`confstore`."""

from __future__ import annotations

from typing import Optional


class ConfigurationError(Exception):
    """Raised when configuration operations fail"""
    pass


class ValidationError(ConfigurationError):
    """Raised when configuration validation fails"""
    pass


class TypeMismatchError(ValidationError):
    """Raised when a value does not match the type of its default"""

    def __init__(self, store_name: str, key: str, expected: str, actual: Optional[str] = None):
        self.store_name = store_name
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(f"{store_name} key {key} is not of type {expected}")


class ConfigParseError(ConfigurationError, ValueError):
    """Raised when a payload cannot be decoded into a JSON object"""
    pass
