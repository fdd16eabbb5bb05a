"""Schema enumerations and constants."""

from __future__ import annotations

from enum import Enum


class ValidatorKind(str, Enum):
    """Discriminant carried by every validator.

    The schema evaluator switches on this tag instead of inspecting
    validator classes.
    """

    REQUIRED = "required"
    CONSTRAINT = "constraint"
    COMBINATOR = "combinator"


class CaseSensitivity(str, Enum):
    """How string comparisons treat letter case."""

    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"

    def normalize(self, value: str) -> str:
        """Normalize a string for comparison under this mode.

        Both operands of a comparison must go through this method.
        """
        if self is CaseSensitivity.INSENSITIVE:
            return value.casefold()
        return value


class SchemaKind(str, Enum):
    """Enumeration of the schema categories built by the factory."""

    STRING = "string"
    NUMBER = "number"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    DATE = "date"


# All kind names as a list
SCHEMA_KINDS: list[str] = [k.value for k in SchemaKind]
