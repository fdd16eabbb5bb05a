"""Default messages for boolean schemas."""

from __future__ import annotations

from ryandata_schema_utils.messages.base import BaseMessages


class BoolMessages(BaseMessages):
    is_true: str = "Must be true"
    is_false: str = "Must be false"
