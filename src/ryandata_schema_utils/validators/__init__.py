"""Validator implementations.

Every validator implements ``evaluate(value) -> str | None`` and carries a
``ValidatorKind`` tag, so schemas can store leaves, the Required validator
and combinators in one list.
"""

from ryandata_schema_utils.validators.base import (
    MessageValidator,
    PredicateValidator,
    RequiredValidator,
    Validator,
)
from ryandata_schema_utils.validators.boolean import IsFalseValidator, IsTrueValidator
from ryandata_schema_utils.validators.combinators import AnyValidator, EveryValidator
from ryandata_schema_utils.validators.date import (
    AfterValidator,
    BeforeValidator,
    DateBetweenValidator,
)
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
from ryandata_schema_utils.validators.string import (
    ContainsValidator,
    EmailValidator,
    EndsWithValidator,
    EqualsValidator,
    LengthBetweenValidator,
    MaxLengthValidator,
    MinLengthValidator,
    NotEmptyValidator,
    PatternValidator,
    StartsWithValidator,
    UrlValidator,
    UuidValidator,
)

__all__ = [
    # Base
    "Validator",
    "MessageValidator",
    "RequiredValidator",
    "PredicateValidator",
    # Combinators
    "AnyValidator",
    "EveryValidator",
    # Numbers
    "MinValidator",
    "MaxValidator",
    "BetweenValidator",
    "PositiveValidator",
    "NegativeValidator",
    "MultipleOfValidator",
    "OddValidator",
    "EvenValidator",
    "FiniteValidator",
    # Strings
    "EqualsValidator",
    "ContainsValidator",
    "StartsWithValidator",
    "EndsWithValidator",
    "MinLengthValidator",
    "MaxLengthValidator",
    "LengthBetweenValidator",
    "PatternValidator",
    "EmailValidator",
    "UrlValidator",
    "UuidValidator",
    "NotEmptyValidator",
    # Booleans
    "IsTrueValidator",
    "IsFalseValidator",
    # Dates
    "AfterValidator",
    "BeforeValidator",
    "DateBetweenValidator",
]
