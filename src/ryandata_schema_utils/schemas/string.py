"""String schema builder.

Example:
    >>> schema = string().equals("password123", case_sensitivity=CaseSensitivity.INSENSITIVE)
    >>> schema.validate("PASSWORD123")
    True
    >>> schema.validate("password124")
    False
"""

from __future__ import annotations

import re
from typing import Self

from ryandata_schema_utils.core.errors import SchemaError
from ryandata_schema_utils.enums import CaseSensitivity
from ryandata_schema_utils.messages.string import StringMessages
from ryandata_schema_utils.schemas.base import TypedSchema
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


class StringSchema(TypedSchema[str, StringMessages]):
    """Schema for ``str`` values.

    ``case_sensitivity`` is the default mode for ``equals``, ``contains``,
    ``starts_with`` and ``ends_with``; each call may override it.
    """

    def __init__(
        self,
        messages: StringMessages,
        *,
        message: str | None = None,
        case_sensitivity: CaseSensitivity = CaseSensitivity.SENSITIVE,
    ) -> None:
        super().__init__(messages, message=message)
        self._case_sensitivity = case_sensitivity

    def _mode(self, case_sensitivity: CaseSensitivity | None) -> CaseSensitivity:
        return case_sensitivity if case_sensitivity is not None else self._case_sensitivity

    def equals(
        self,
        expected: str,
        *,
        case_sensitivity: CaseSensitivity | None = None,
        message: str | None = None,
    ) -> Self:
        """Value must equal ``expected``."""
        return self.add(
            EqualsValidator(
                expected,
                self._mode(case_sensitivity),
                message=self._message(message, "equals", expected),
            )
        )

    def contains(
        self,
        part: str,
        *,
        case_sensitivity: CaseSensitivity | None = None,
        message: str | None = None,
    ) -> Self:
        return self.add(
            ContainsValidator(
                part,
                self._mode(case_sensitivity),
                message=self._message(message, "contains", part),
            )
        )

    def starts_with(
        self,
        prefix: str,
        *,
        case_sensitivity: CaseSensitivity | None = None,
        message: str | None = None,
    ) -> Self:
        return self.add(
            StartsWithValidator(
                prefix,
                self._mode(case_sensitivity),
                message=self._message(message, "starts_with", prefix),
            )
        )

    def ends_with(
        self,
        suffix: str,
        *,
        case_sensitivity: CaseSensitivity | None = None,
        message: str | None = None,
    ) -> Self:
        return self.add(
            EndsWithValidator(
                suffix,
                self._mode(case_sensitivity),
                message=self._message(message, "ends_with", suffix),
            )
        )

    def min(self, length: int, *, message: str | None = None) -> Self:
        """Value must be at least ``length`` characters long."""
        return self.add(MinLengthValidator(length, message=self._message(message, "min", length)))

    def max(self, length: int, *, message: str | None = None) -> Self:
        """Value must be at most ``length`` characters long."""
        return self.add(MaxLengthValidator(length, message=self._message(message, "max", length)))

    def length(self, minimum: int, maximum: int, *, message: str | None = None) -> Self:
        """Value length must lie in ``[minimum, maximum]``.

        Raises:
            SchemaError: If ``minimum`` is greater than ``maximum``.
        """
        if minimum > maximum:
            raise SchemaError.create(
                "invalid_range",
                "Length minimum {minimum} is greater than maximum {maximum}",
                {"minimum": minimum, "maximum": maximum},
            )
        return self.add(
            LengthBetweenValidator(
                minimum,
                maximum,
                message=self._message(message, "length", minimum, maximum),
            )
        )

    def pattern(self, pattern: str | re.Pattern[str], *, message: str | None = None) -> Self:
        """The whole value must match ``pattern``.

        Raises:
            SchemaError: If ``pattern`` is not a valid regular expression.
        """
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            raise SchemaError.create(
                "invalid_pattern",
                "Invalid regular expression {pattern}: {reason}",
                {"pattern": str(pattern), "reason": str(exc)},
            ) from exc
        return self.add(
            PatternValidator(compiled, message=self._message(message, "pattern", compiled.pattern))
        )

    def email(self, *, message: str | None = None) -> Self:
        return self.add(EmailValidator(message=self._message(message, "email")))

    def url(self, *, message: str | None = None) -> Self:
        return self.add(UrlValidator(message=self._message(message, "url")))

    def uuid(self, *, message: str | None = None) -> Self:
        return self.add(UuidValidator(message=self._message(message, "uuid")))

    def not_empty(self, *, message: str | None = None) -> Self:
        """Value must contain a non-whitespace character."""
        return self.add(NotEmptyValidator(message=self._message(message, "not_empty")))
