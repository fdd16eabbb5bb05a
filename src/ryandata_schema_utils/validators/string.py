"""String leaf validators.

Comparisons that honour ``CaseSensitivity`` normalize both operands with
the same function before comparing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlparse
from uuid import UUID

from ryandata_schema_utils.enums import CaseSensitivity
from ryandata_schema_utils.validators.base import MessageValidator

EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)+"
)
URL_SCHEMES = frozenset({"http", "https", "ftp"})


@dataclass(frozen=True)
class _CaseAwareValidator(MessageValidator[str]):
    expected: str
    case_sensitivity: CaseSensitivity = CaseSensitivity.SENSITIVE

    def _operands(self, value: str) -> tuple[str, str]:
        normalize = self.case_sensitivity.normalize
        return normalize(value), normalize(self.expected)


@dataclass(frozen=True)
class EqualsValidator(_CaseAwareValidator):
    """Value must equal ``expected``.

    Example:
        >>> validator = EqualsValidator(
        ...     "password123",
        ...     case_sensitivity=CaseSensitivity.INSENSITIVE,
        ...     message="Must be password123",
        ... )
        >>> validator.evaluate("PASSWORD123") is None
        True
    """

    def is_valid(self, value: str) -> bool:
        actual, expected = self._operands(value)
        return actual == expected


@dataclass(frozen=True)
class ContainsValidator(_CaseAwareValidator):
    def is_valid(self, value: str) -> bool:
        actual, expected = self._operands(value)
        return expected in actual


@dataclass(frozen=True)
class StartsWithValidator(_CaseAwareValidator):
    def is_valid(self, value: str) -> bool:
        actual, expected = self._operands(value)
        return actual.startswith(expected)


@dataclass(frozen=True)
class EndsWithValidator(_CaseAwareValidator):
    def is_valid(self, value: str) -> bool:
        actual, expected = self._operands(value)
        return actual.endswith(expected)


@dataclass(frozen=True)
class MinLengthValidator(MessageValidator[str]):
    min_length: int

    def is_valid(self, value: str) -> bool:
        return len(value) >= self.min_length


@dataclass(frozen=True)
class MaxLengthValidator(MessageValidator[str]):
    max_length: int

    def is_valid(self, value: str) -> bool:
        return len(value) <= self.max_length


@dataclass(frozen=True)
class LengthBetweenValidator(MessageValidator[str]):
    min_length: int
    max_length: int

    def is_valid(self, value: str) -> bool:
        return self.min_length <= len(value) <= self.max_length


@dataclass(frozen=True)
class PatternValidator(MessageValidator[str]):
    """The whole value must match ``pattern``."""

    pattern: re.Pattern[str]

    def is_valid(self, value: str) -> bool:
        return self.pattern.fullmatch(value) is not None


@dataclass(frozen=True, kw_only=True)
class EmailValidator(MessageValidator[str]):
    def is_valid(self, value: str) -> bool:
        return EMAIL_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True, kw_only=True)
class UrlValidator(MessageValidator[str]):
    """Absolute http, https or ftp URL with a host."""

    def is_valid(self, value: str) -> bool:
        try:
            parsed = urlparse(value)
        except ValueError:
            return False
        return parsed.scheme.lower() in URL_SCHEMES and bool(parsed.netloc)


@dataclass(frozen=True, kw_only=True)
class UuidValidator(MessageValidator[str]):
    def is_valid(self, value: str) -> bool:
        try:
            UUID(value)
        except ValueError:
            return False
        return True


@dataclass(frozen=True, kw_only=True)
class NotEmptyValidator(MessageValidator[str]):
    """Value must contain at least one non-whitespace character."""

    def is_valid(self, value: str) -> bool:
        return bool(value.strip())
