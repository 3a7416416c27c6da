"""Exceptions raised by the profile evaluator."""
from __future__ import annotations

from typing import Any


class DiffusionError(ValueError):
    """
    Base class for invalid evaluator input.

    Attributes:
        field: Name of the offending argument.
        value: The rejected value.
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}={value!r}: {reason}")


class InvalidParameter(DiffusionError):
    """A physical input (D, L, C0, t) lies outside its domain."""


class InvalidConfiguration(DiffusionError):
    """An algorithm-quality knob or driver setting is out of range."""
