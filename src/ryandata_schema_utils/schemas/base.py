"""Schema node and typed builder base.

A schema is an ordered list of validators plus two independent flags:

* ``nullable`` accepts ``None`` before any validator runs.
* ``optional`` tolerates a failure of the Required validator only; every
  other constraint still applies to present values.

Validators run in insertion order and the first failure wins, so the order
of chained calls is part of a schema's meaning.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Generic, Self, TypeVar

from abstract_validation_base import ValidationResult

from ryandata_schema_utils.core.errors import SchemaValidationError
from ryandata_schema_utils.enums import ValidatorKind
from ryandata_schema_utils.messages.base import BaseMessages
from ryandata_schema_utils.validators.base import (
    PredicateValidator,
    RequiredValidator,
    Validator,
)
from ryandata_schema_utils.validators.combinators import AnyValidator, EveryValidator

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseMessages)


class Schema(Generic[T]):
    """Generic schema node.

    Every chaining method mutates this node and returns it, so
    ``schema.add(a).add(b).optional()`` configures a single object. Build a
    schema fully before sharing it: evaluation reads ``validators`` without
    locking.

    Example:
        >>> schema = Schema[int]().add(RequiredValidator(message="required"))
        >>> schema.evaluate(None)
        'required'
        >>> schema.optional().evaluate(None) is None
        True
    """

    def __init__(self) -> None:
        self._validators: list[Validator[T]] = []
        self._is_optional = False
        self._is_nullable = False

    @property
    def validators(self) -> tuple[Validator[T], ...]:
        """Configured validators in evaluation order."""
        return tuple(self._validators)

    @property
    def is_optional(self) -> bool:
        return self._is_optional

    @property
    def is_nullable(self) -> bool:
        return self._is_nullable

    def add(self, validator: Validator[T]) -> Self:
        """Append a validator. Repeated constraints are all kept and all run."""
        self._validators.append(validator)
        return self

    def optional(self) -> Self:
        """Tolerate absence: a failing Required validator counts as valid."""
        self._is_optional = True
        return self

    def nullable(self) -> Self:
        """Accept ``None`` without running any validator."""
        self._is_nullable = True
        return self

    def evaluate(self, value: T | None) -> str | None:
        """Evaluate a value against the schema.

        Args:
            value: Candidate value, or None when absent.

        Returns:
            None if the value is valid, otherwise the message of the first
            failing validator.
        """
        if value is None and self._is_nullable:
            return None

        for validator in self._validators:
            message = validator.evaluate(value)
            if message is None:
                continue
            if validator.kind is ValidatorKind.REQUIRED and self._is_optional:
                return None
            logger.debug(
                "Schema %s rejected value (%s validator): %s",
                type(self).__name__,
                validator.kind.value,
                message,
            )
            return message

        return None

    def validate(self, value: T | None) -> bool:
        """Return True when ``evaluate(value)`` is None."""
        return self.evaluate(value) is None

    def assert_valid(self, value: T | None) -> T | None:
        """Return ``value`` unchanged if valid.

        Raises:
            SchemaValidationError: With the failure message if invalid.
        """
        message = self.evaluate(value)
        if message is not None:
            raise SchemaValidationError(message, value)
        return value

    def check(self, value: T | None, field: str = "value") -> ValidationResult:
        """Evaluate a value and report it as a ValidationResult.

        Args:
            value: Candidate value.
            field: Field name recorded on the error.

        Returns:
            ValidationResult with at most one error.
        """
        result = ValidationResult(is_valid=True)
        message = self.evaluate(value)
        if message is not None:
            result.add_error(field, message, value)
        return result

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(validators={len(self._validators)}, "
            f"optional={self._is_optional}, nullable={self._is_nullable})"
        )


class TypedSchema(Schema[T], Generic[T, M]):
    """Fluent builder base for one value category.

    Holds the category's message container and starts with a Required
    validator. Constraint methods resolve their message as: the explicit
    ``message`` argument if given, else the container's default for that
    constraint kind.
    """

    def __init__(self, messages: M, *, message: str | None = None) -> None:
        super().__init__()
        self._messages = messages
        self.add(RequiredValidator(message=self._message(message, "required")))

    @property
    def messages(self) -> M:
        return self._messages

    def _message(self, explicit: str | None, kind: str, *args: Any) -> str:
        if explicit is not None:
            return explicit
        return self._messages.resolve(kind, *args)

    def refine(self, predicate: Callable[[T], bool], *, message: str | None = None) -> Self:
        """Add a custom check; the value is valid when ``predicate`` is truthy.

        Example:
            >>> even = integer().refine(lambda v: v % 2 == 0, message="even")
        """
        return self.add(PredicateValidator(predicate, message=self._message(message, "refine")))

    def any(self, schemas: Sequence[Self], *, message: str | None = None) -> Self:
        """Require the value to satisfy at least one of ``schemas``.

        An empty list never matches.
        """
        return self.add(AnyValidator(schemas, message=self._message(message, "any")))

    def every(self, schemas: Sequence[Self], *, message: str | None = None) -> Self:
        """Require the value to satisfy all of ``schemas``.

        An empty list always matches.
        """
        return self.add(EveryValidator(schemas, message=self._message(message, "every")))
