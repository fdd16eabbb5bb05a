from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class EvaluatorProtocol(Protocol[T_contra]):
    """Anything that turns a value into an error message or ``None``.

    Validators and whole schemas both satisfy this protocol, which is
    what lets combinators hold sub-schemas next to plain validators.
    """

    def evaluate(self, value: T_contra | None) -> str | None:
        """Evaluate a value.

        Args:
            value: Candidate value, or None when absent.

        Returns:
            None if the value is valid, otherwise an error message.
        """
        ...


@runtime_checkable
class SchemaProtocol(EvaluatorProtocol[T_contra], Protocol[T_contra]):
    """Protocol for schema nodes consumed by pipelines and pandas helpers."""

    def validate(self, value: T_contra | None) -> bool:
        """Return True when ``evaluate(value)`` is None."""
        ...
