"""Combinator validators built from whole sub-schemas.

``AnyValidator`` is a disjunction and ``EveryValidator`` a conjunction of
sub-schemas. Both report only their own message; the reasons individual
sub-schemas gave are discarded.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from ryandata_schema_utils.enums import ValidatorKind
from ryandata_schema_utils.protocols import EvaluatorProtocol
from ryandata_schema_utils.validators.base import Validator

T = TypeVar("T")


@dataclass(frozen=True)
class _CombinatorValidator(Validator[T], Generic[T]):
    schemas: Sequence[EvaluatorProtocol[T]]
    message: str = field(kw_only=True)

    kind = ValidatorKind.COMBINATOR

    def __post_init__(self) -> None:
        # Detach from the caller's list so later appends do not leak in.
        object.__setattr__(self, "schemas", tuple(self.schemas))


@dataclass(frozen=True)
class AnyValidator(_CombinatorValidator[T]):
    """Valid when at least one sub-schema accepts the value.

    An empty sub-schema list never matches.
    """

    def evaluate(self, value: T | None) -> str | None:
        if not self.schemas:
            return self.message
        for schema in self.schemas:
            if schema.evaluate(value) is None:
                return None
        return self.message


@dataclass(frozen=True)
class EveryValidator(_CombinatorValidator[T]):
    """Valid when every sub-schema accepts the value.

    Stops at the first rejecting sub-schema. An empty sub-schema list
    always matches.
    """

    def evaluate(self, value: T | None) -> str | None:
        if not self.schemas:
            return None
        for schema in self.schemas:
            if schema.evaluate(value) is not None:
                return self.message
        return None
