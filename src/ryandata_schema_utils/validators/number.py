"""Numeric leaf validators.

Range checks are inclusive. Thresholds are captured at construction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ryandata_schema_utils.validators.base import MessageValidator

Number = int | float


@dataclass(frozen=True)
class MinValidator(MessageValidator[Number]):
    """Value must be greater than or equal to ``minimum``."""

    minimum: Number

    def is_valid(self, value: Number) -> bool:
        return value >= self.minimum


@dataclass(frozen=True)
class MaxValidator(MessageValidator[Number]):
    """Value must be less than or equal to ``maximum``."""

    maximum: Number

    def is_valid(self, value: Number) -> bool:
        return value <= self.maximum


@dataclass(frozen=True)
class BetweenValidator(MessageValidator[Number]):
    """Value must lie in ``[minimum, maximum]``."""

    minimum: Number
    maximum: Number

    def is_valid(self, value: Number) -> bool:
        return self.minimum <= value <= self.maximum


@dataclass(frozen=True, kw_only=True)
class PositiveValidator(MessageValidator[Number]):
    def is_valid(self, value: Number) -> bool:
        return value > 0


@dataclass(frozen=True, kw_only=True)
class NegativeValidator(MessageValidator[Number]):
    def is_valid(self, value: Number) -> bool:
        return value < 0


@dataclass(frozen=True)
class MultipleOfValidator(MessageValidator[Number]):
    """Value must be an exact multiple of ``factor``.

    Float operands are compared with a relative tolerance so that
    ``0.3`` counts as a multiple of ``0.1``.
    """

    factor: Number

    def is_valid(self, value: Number) -> bool:
        if isinstance(value, int) and isinstance(self.factor, int):
            return value % self.factor == 0
        try:
            quotient = value / self.factor
        except OverflowError:
            return False
        if not math.isfinite(quotient):
            return False
        return math.isclose(quotient, round(quotient), rel_tol=1e-9, abs_tol=1e-9)


@dataclass(frozen=True, kw_only=True)
class OddValidator(MessageValidator[int]):
    def is_valid(self, value: int) -> bool:
        return value % 2 != 0


@dataclass(frozen=True, kw_only=True)
class EvenValidator(MessageValidator[int]):
    def is_valid(self, value: int) -> bool:
        return value % 2 == 0


@dataclass(frozen=True, kw_only=True)
class FiniteValidator(MessageValidator[float]):
    """Rejects ``nan`` and infinities."""

    def is_valid(self, value: float) -> bool:
        return math.isfinite(value)
