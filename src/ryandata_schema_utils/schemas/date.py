"""Date schema builder.

Works with ``datetime.date`` and ``datetime.datetime`` values; compare like
with like.
"""

from __future__ import annotations

from datetime import date
from typing import Self

from ryandata_schema_utils.core.errors import SchemaError
from ryandata_schema_utils.messages.date import DateMessages
from ryandata_schema_utils.schemas.base import TypedSchema
from ryandata_schema_utils.validators.date import (
    AfterValidator,
    BeforeValidator,
    DateBetweenValidator,
)


class DateSchema(TypedSchema[date, DateMessages]):
    def after(self, limit: date, *, message: str | None = None) -> Self:
        """Value must be strictly later than ``limit``."""
        return self.add(AfterValidator(limit, message=self._message(message, "after", limit)))

    def before(self, limit: date, *, message: str | None = None) -> Self:
        """Value must be strictly earlier than ``limit``."""
        return self.add(BeforeValidator(limit, message=self._message(message, "before", limit)))

    def between(self, start: date, end: date, *, message: str | None = None) -> Self:
        """Value must lie in ``[start, end]``.

        Raises:
            SchemaError: If ``start`` is later than ``end``.
        """
        if start > end:
            raise SchemaError.create(
                "invalid_range",
                "Range start {start} is later than end {end}",
                {"start": start.isoformat(), "end": end.isoformat()},
            )
        return self.add(
            DateBetweenValidator(start, end, message=self._message(message, "between", start, end))
        )
