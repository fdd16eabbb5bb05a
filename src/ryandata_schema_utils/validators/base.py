"""Abstract base validator classes.

A validator is a single constraint. It is configured once at construction
and evaluated as a pure function of the candidate value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

from ryandata_schema_utils.enums import ValidatorKind

T = TypeVar("T")


class Validator(ABC, Generic[T]):
    """Abstract base class for validators.

    Generic over T, the type of value being checked. ``kind`` tells the
    schema evaluator how to treat a failure of this validator.

    Example:
        @dataclass(frozen=True)
        class NonZeroValidator(MessageValidator[int]):
            def is_valid(self, value: int) -> bool:
                return value != 0
    """

    kind: ClassVar[ValidatorKind] = ValidatorKind.CONSTRAINT

    @abstractmethod
    def evaluate(self, value: T | None) -> str | None:
        """Evaluate a value.

        Args:
            value: Candidate value, or None when absent.

        Returns:
            None if the value satisfies the constraint, otherwise a message.
        """
        ...

    def __call__(self, value: T | None) -> str | None:
        return self.evaluate(value)


@dataclass(frozen=True, kw_only=True)
class MessageValidator(Validator[T]):
    """Validator that reports one fixed, already resolved message.

    Subclasses only decide validity. An absent value never reaches
    ``is_valid``: it fails with the configured message.
    """

    message: str

    @abstractmethod
    def is_valid(self, value: T) -> bool:
        """Return True when a present value satisfies the constraint."""
        ...

    def evaluate(self, value: T | None) -> str | None:
        if value is None or not self.is_valid(value):
            return self.message
        return None


@dataclass(frozen=True, kw_only=True)
class RequiredValidator(MessageValidator[object]):
    """Fails whenever the value is absent (``None``).

    Falsy values such as ``0``, ``""`` and ``False`` are present.
    """

    kind = ValidatorKind.REQUIRED

    def is_valid(self, value: object) -> bool:
        return value is not None


@dataclass(frozen=True)
class PredicateValidator(MessageValidator[T]):
    """Custom refinement: the value is valid when ``predicate`` returns truthy."""

    predicate: Callable[[T], bool]

    def is_valid(self, value: T) -> bool:
        return bool(self.predicate(value))
