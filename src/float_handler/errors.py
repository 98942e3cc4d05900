"""Exceptions raised by the float_handler package."""

from __future__ import annotations

from typing import Any


class FloatHandlerError(Exception):
    """Base class for errors raised by float_handler."""


class InvalidArgumentError(FloatHandlerError, ValueError):
    """Raised when an argument has an unusable value (empty locale, negative decimals, ...)."""

    def __init__(self, argument: str, value: Any, reason: str):
        self.argument = argument
        self.value = value
        self.reason = reason
        super().__init__(reason)
