from __future__ import annotations

from dataclasses import dataclass

from ryandata_schema_utils.validators.base import MessageValidator


@dataclass(frozen=True, kw_only=True)
class IsTrueValidator(MessageValidator[bool]):
    def is_valid(self, value: bool) -> bool:
        return value is True


@dataclass(frozen=True, kw_only=True)
class IsFalseValidator(MessageValidator[bool]):
    def is_valid(self, value: bool) -> bool:
        return value is False
