"""Numeric schema builders.

``NumberSchema`` accepts ints and floats; ``IntSchema`` adds parity checks
and ``FloatSchema`` adds a finiteness check.

Example:
    >>> schema = number().min(5).max(10).multiple_of(2)
    >>> schema.validate(6)
    True
    >>> schema.evaluate(7)
    'Must be a multiple of 2'
"""

from __future__ import annotations

from typing import Generic, Self, TypeVar

from ryandata_schema_utils.core.errors import SchemaError
from ryandata_schema_utils.messages.number import FloatMessages, IntMessages, NumberMessages
from ryandata_schema_utils.schemas.base import TypedSchema
from ryandata_schema_utils.validators.number import (
    BetweenValidator,
    EvenValidator,
    FiniteValidator,
    MaxValidator,
    MinValidator,
    MultipleOfValidator,
    NegativeValidator,
    OddValidator,
    PositiveValidator,
)

N = TypeVar("N", int, float)
NM = TypeVar("NM", bound=NumberMessages)


class NumericSchema(TypedSchema[N, NM], Generic[N, NM]):
    """Constraints shared by every numeric schema."""

    def min(self, minimum: N, *, message: str | None = None) -> Self:
        """Value must be greater than or equal to ``minimum``."""
        return self.add(MinValidator(minimum, message=self._message(message, "min", minimum)))

    def max(self, maximum: N, *, message: str | None = None) -> Self:
        """Value must be less than or equal to ``maximum``."""
        return self.add(MaxValidator(maximum, message=self._message(message, "max", maximum)))

    def between(self, minimum: N, maximum: N, *, message: str | None = None) -> Self:
        """Value must lie in ``[minimum, maximum]``.

        Raises:
            SchemaError: If ``minimum`` is greater than ``maximum``.
        """
        if minimum > maximum:
            raise SchemaError.create(
                "invalid_range",
                "Range minimum {minimum} is greater than maximum {maximum}",
                {"minimum": minimum, "maximum": maximum},
            )
        return self.add(
            BetweenValidator(
                minimum,
                maximum,
                message=self._message(message, "between", minimum, maximum),
            )
        )

    def positive(self, *, message: str | None = None) -> Self:
        return self.add(PositiveValidator(message=self._message(message, "positive")))

    def negative(self, *, message: str | None = None) -> Self:
        return self.add(NegativeValidator(message=self._message(message, "negative")))

    def multiple_of(self, factor: N, *, message: str | None = None) -> Self:
        """Value must be an exact multiple of ``factor``.

        Raises:
            SchemaError: If ``factor`` is zero.
        """
        if factor == 0:
            raise SchemaError.create(
                "invalid_factor", "multiple_of factor must not be zero", {"factor": factor}
            )
        return self.add(
            MultipleOfValidator(factor, message=self._message(message, "multiple_of", factor))
        )


class NumberSchema(NumericSchema[float, NumberMessages]):
    """Schema for ``int`` or ``float`` values."""


class IntSchema(NumericSchema[int, IntMessages]):
    """Schema for ``int`` values."""

    def odd(self, *, message: str | None = None) -> Self:
        return self.add(OddValidator(message=self._message(message, "odd")))

    def even(self, *, message: str | None = None) -> Self:
        return self.add(EvenValidator(message=self._message(message, "even")))


class FloatSchema(NumericSchema[float, FloatMessages]):
    """Schema for ``float`` values."""

    def finite(self, *, message: str | None = None) -> Self:
        """Reject ``nan`` and infinities."""
        return self.add(FiniteValidator(message=self._message(message, "finite")))
