"""Schema error classes with package identification.

Validation failures are never raised: a schema reports them as message
strings. The classes here cover construction misuse (a malformed
constraint, an unknown message kind) and the opt-in ``assert_valid`` path.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "ryandata_schema_utils"


class SchemaError(PydanticCustomError):
    """Raised when a schema or message container is built incorrectly.

    Inherits from PydanticCustomError so it can be raised from inside
    pydantic validators and still carry its type and context.
    """

    @classmethod
    def create(
        cls,
        error_type: str,
        message_template: str,
        context: dict[str, Any] | None = None,
    ) -> SchemaError:
        """Build a SchemaError whose context always names the package.

        Args:
            error_type: Type/category of the error.
            message_template: Error message (can include {placeholders}).
            context: Additional context merged into the error context.

        Returns:
            SchemaError instance.
        """
        return cls(error_type, message_template, {"package": PACKAGE_NAME, **(context or {})})


class SchemaValidationError(Exception):
    """Raised by ``Schema.assert_valid`` when a value fails its schema."""

    def __init__(self, message: str, value: Any = None, context: dict | None = None):
        """Initialize SchemaValidationError.

        Args:
            message: The failure message produced by the schema.
            value: The value that was rejected.
            context: Optional additional context to include.
        """
        self.message = message
        self.value = value
        self.context = {"package": PACKAGE_NAME, **(context or {})}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"SchemaValidationError({self.message!r}, value={self.value!r})"
