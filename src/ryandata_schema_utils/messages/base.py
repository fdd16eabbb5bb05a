"""Base message container classes.

Message containers are immutable pydantic models. Each field maps a
constraint kind to either literal text or a function that formats the text
from the constraint's parameters. Derived containers are produced with
``copy_with``; the original is never mutated.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict

from ryandata_schema_utils.core.errors import SchemaError


class MessageContainer(BaseModel):
    """Frozen pydantic model with structural copy-with-overrides."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def kinds(cls) -> list[str]:
        """Names of the constraint kinds this container exposes."""
        return list(cls.model_fields)

    def copy_with(self, **overrides: Any) -> Self:
        """Return a new container with some entries replaced.

        ``None`` values are ignored so callers can forward optional
        arguments unchanged.

        Args:
            **overrides: Constraint kind to replacement text or formatter.

        Returns:
            New container of the same type.

        Raises:
            SchemaError: If an override names an unknown constraint kind.
            pydantic.ValidationError: If a replacement has the wrong shape.
        """
        unknown = sorted(set(overrides) - set(type(self).model_fields))
        if unknown:
            raise SchemaError.create(
                "unknown_message_kind",
                "Unknown message kind(s) for {container}: {kinds}",
                {"container": type(self).__name__, "kinds": ", ".join(unknown)},
            )
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update({k: v for k, v in overrides.items() if v is not None})
        return type(self).model_validate(data)


class BaseMessages(MessageContainer):
    """Messages shared by every schema category."""

    required: str = "This field is required"
    refine: str = "Invalid value"
    any: str = "Value does not match any of the allowed schemas"
    every: str = "Value does not match all of the required schemas"

    def resolve(self, kind: str, *args: Any) -> str:
        """Compute the default message for a constraint kind.

        Args:
            kind: Field name of the constraint kind (e.g. ``"min"``).
            *args: Constraint parameters passed to formatter fields.

        Returns:
            The literal text, or the formatter's output.
        """
        default = getattr(self, kind)
        if callable(default):
            return default(*args)
        return default
