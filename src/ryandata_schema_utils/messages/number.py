"""Default messages for numeric schemas."""

from __future__ import annotations

from collections.abc import Callable

from ryandata_schema_utils.messages.base import BaseMessages


class NumberMessages(BaseMessages):
    """Messages for ``NumberSchema`` and the base of the int/float containers."""

    min: Callable[[float], str] = lambda minimum: f"Must be greater than or equal to {minimum}"
    max: Callable[[float], str] = lambda maximum: f"Must be less than or equal to {maximum}"
    between: Callable[[float, float], str] = (
        lambda minimum, maximum: f"Must be between {minimum} and {maximum}"
    )
    multiple_of: Callable[[float], str] = lambda factor: f"Must be a multiple of {factor}"
    positive: str = "Must be a positive number"
    negative: str = "Must be a negative number"


class IntMessages(NumberMessages):
    odd: str = "Must be an odd number"
    even: str = "Must be an even number"


class FloatMessages(NumberMessages):
    finite: str = "Must be a finite number"
