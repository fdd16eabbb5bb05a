"""Default messages for date schemas."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from ryandata_schema_utils.messages.base import BaseMessages


class DateMessages(BaseMessages):
    after: Callable[[date], str] = lambda limit: f"Must be after {limit.isoformat()}"
    before: Callable[[date], str] = lambda limit: f"Must be before {limit.isoformat()}"
    between: Callable[[date, date], str] = (
        lambda start, end: f"Must be between {start.isoformat()} and {end.isoformat()}"
    )
