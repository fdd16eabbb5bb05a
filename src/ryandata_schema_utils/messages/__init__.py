"""Default message containers.

Builders never hard-code message text: every default comes from one of
these containers and is only computed when the caller gives no explicit
message.
"""

from ryandata_schema_utils.messages.base import BaseMessages, MessageContainer
from ryandata_schema_utils.messages.boolean import BoolMessages
from ryandata_schema_utils.messages.date import DateMessages
from ryandata_schema_utils.messages.locales import (
    DEFAULT_LOCALE,
    MESSAGE_SETS,
    MessageSet,
    available_locales,
    get_message_set,
    register_message_set,
)
from ryandata_schema_utils.messages.number import FloatMessages, IntMessages, NumberMessages
from ryandata_schema_utils.messages.string import StringMessages

__all__ = [
    "MessageContainer",
    "BaseMessages",
    "NumberMessages",
    "IntMessages",
    "FloatMessages",
    "StringMessages",
    "BoolMessages",
    "DateMessages",
    "MessageSet",
    "DEFAULT_LOCALE",
    "MESSAGE_SETS",
    "available_locales",
    "get_message_set",
    "register_message_set",
]
