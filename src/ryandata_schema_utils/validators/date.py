"""Date leaf validators.

``after`` and ``before`` are strict; ``between`` is inclusive on both ends.
Operands must be mutually comparable (both ``date`` or both ``datetime``
with the same awareness).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ryandata_schema_utils.validators.base import MessageValidator


@dataclass(frozen=True)
class AfterValidator(MessageValidator[date]):
    limit: date

    def is_valid(self, value: date) -> bool:
        return value > self.limit


@dataclass(frozen=True)
class BeforeValidator(MessageValidator[date]):
    limit: date

    def is_valid(self, value: date) -> bool:
        return value < self.limit


@dataclass(frozen=True)
class DateBetweenValidator(MessageValidator[date]):
    start: date
    end: date

    def is_valid(self, value: date) -> bool:
        return self.start <= value <= self.end
