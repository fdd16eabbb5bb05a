from __future__ import annotations

from typing import Self

from ryandata_schema_utils.messages.boolean import BoolMessages
from ryandata_schema_utils.schemas.base import TypedSchema
from ryandata_schema_utils.validators.boolean import IsFalseValidator, IsTrueValidator


class BoolSchema(TypedSchema[bool, BoolMessages]):
    """Schema for ``bool`` values."""

    def is_true(self, *, message: str | None = None) -> Self:
        return self.add(IsTrueValidator(message=self._message(message, "is_true")))

    def is_false(self, *, message: str | None = None) -> Self:
        return self.add(IsFalseValidator(message=self._message(message, "is_false")))
