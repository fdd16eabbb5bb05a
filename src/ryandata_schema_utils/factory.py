"""Schema factories.

``SchemaFactory`` creates schemas from a registry of kind names (used by
the CLI and by callers that pick the schema type at runtime). ``Schemas``
is the typed facade that binds a locale's message set to every builder.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, ClassVar

from ryandata_schema_utils.core.config import SchemaConfig
from ryandata_schema_utils.enums import CaseSensitivity, SchemaKind
from ryandata_schema_utils.messages.base import BaseMessages
from ryandata_schema_utils.messages.locales import MessageSet, get_message_set
from ryandata_schema_utils.schemas.base import TypedSchema
from ryandata_schema_utils.schemas.boolean import BoolSchema
from ryandata_schema_utils.schemas.date import DateSchema
from ryandata_schema_utils.schemas.number import FloatSchema, IntSchema, NumberSchema
from ryandata_schema_utils.schemas.string import StringSchema

logger = logging.getLogger(__name__)

# (schema class, MessageSet field holding its default messages)
SchemaEntry = tuple[type[TypedSchema[Any, Any]], str]


class SchemaFactory:
    """Registry-backed factory for typed schemas.

    Example:
        >>> schema = SchemaFactory.create("int", message="Age is required")
        >>> schema.min(18).validate(21)
        True

        # Register a custom schema type
        >>> SchemaFactory.register("slug", SlugSchema, "string")
    """

    _registry: ClassVar[dict[str, SchemaEntry]] = {}
    _default_type: ClassVar[str] = SchemaKind.STRING.value

    _defaults: ClassVar[dict[str, SchemaEntry]] = {
        SchemaKind.STRING.value: (StringSchema, "string"),
        SchemaKind.NUMBER.value: (NumberSchema, "number"),
        SchemaKind.INT.value: (IntSchema, "integer"),
        SchemaKind.FLOAT.value: (FloatSchema, "floating"),
        SchemaKind.BOOL.value: (BoolSchema, "boolean"),
        SchemaKind.DATE.value: (DateSchema, "date"),
    }

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        for name, entry in cls._defaults.items():
            cls._registry.setdefault(name, entry)

    @classmethod
    def register(
        cls,
        name: str,
        schema_class: type[TypedSchema[Any, Any]],
        messages_field: str,
    ) -> None:
        """Register a schema type.

        Args:
            name: Kind name used with ``create``.
            schema_class: TypedSchema subclass to instantiate.
            messages_field: MessageSet field supplying its default messages.
        """
        if messages_field not in MessageSet.model_fields:
            raise ValueError(
                f"Unknown message set field: {messages_field}. "
                f"Available fields: {', '.join(MessageSet.kinds())}"
            )
        cls._registry[name] = (schema_class, messages_field)

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._registry.pop(name, None)

    @classmethod
    def create(
        cls,
        kind: str | SchemaKind | None = None,
        *,
        messages: BaseMessages | None = None,
        locale: str | None = None,
        **kwargs: Any,
    ) -> TypedSchema[Any, Any]:
        """Create a schema of the specified kind.

        Args:
            kind: Kind name. If None, uses the default kind (``string``).
            messages: Message container to use instead of the locale default.
            locale: Locale whose message set supplies the defaults.
            **kwargs: Arguments passed to the schema constructor
                (``message``, ``case_sensitivity``).

        Returns:
            New schema with its Required validator in place.

        Raises:
            ValueError: If the kind is not registered.
        """
        cls._ensure_defaults_registered()

        if isinstance(kind, SchemaKind):
            kind = kind.value
        type_name = kind if kind is not None else cls._default_type

        if type_name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise ValueError(f"Unknown schema type: {type_name}. Available types: {available}")

        schema_class, messages_field = cls._registry[type_name]
        if messages is None:
            messages = getattr(get_message_set(locale), messages_field)

        logger.debug("Creating %s schema (%s)", type_name, schema_class.__name__)
        return schema_class(messages, **kwargs)

    @classmethod
    def available_types(cls) -> list[str]:
        cls._ensure_defaults_registered()
        return sorted(cls._registry.keys())

    @classmethod
    def clear_registry(cls) -> None:
        """Clear the registry (mainly for testing)."""
        cls._registry.clear()


class Schemas:
    """Typed entry point for building schemas.

    Example:
        >>> s = Schemas()
        >>> s.integer().min(5).max(10).validate(7)
        True
        >>> Schemas(locale="pt_BR").string().evaluate(None)
        'Campo obrigatório'
    """

    def __init__(
        self,
        locale: str | None = None,
        messages: MessageSet | None = None,
        config: SchemaConfig | None = None,
    ) -> None:
        """Initialize the facade.

        Args:
            locale: Registered locale name. Defaults to ``config.locale``.
            messages: Explicit message set; takes precedence over ``locale``.
            config: Defaults read from the environment when omitted.
        """
        self._config = config or SchemaConfig()
        self._messages = messages or get_message_set(locale or self._config.locale)

    @property
    def messages(self) -> MessageSet:
        return self._messages

    def with_messages(self, **overrides: Any) -> Schemas:
        """Return a facade whose message set has some categories replaced."""
        return Schemas(messages=self._messages.copy_with(**overrides), config=self._config)

    def string(
        self,
        *,
        message: str | None = None,
        case_sensitivity: CaseSensitivity | None = None,
    ) -> StringSchema:
        return StringSchema(
            self._messages.string,
            message=message,
            case_sensitivity=case_sensitivity or self._config.case_sensitivity,
        )

    def number(self, *, message: str | None = None) -> NumberSchema:
        return NumberSchema(self._messages.number, message=message)

    def integer(self, *, message: str | None = None) -> IntSchema:
        return IntSchema(self._messages.integer, message=message)

    def double(self, *, message: str | None = None) -> FloatSchema:
        return FloatSchema(self._messages.floating, message=message)

    def boolean(self, *, message: str | None = None) -> BoolSchema:
        return BoolSchema(self._messages.boolean, message=message)

    def date(self, *, message: str | None = None) -> DateSchema:
        return DateSchema(self._messages.date, message=message)


@lru_cache(maxsize=1)
def get_schemas() -> Schemas:
    """Get the shared default facade (configured from the environment)."""
    return Schemas()


def string(*, message: str | None = None) -> StringSchema:
    return get_schemas().string(message=message)


def number(*, message: str | None = None) -> NumberSchema:
    return get_schemas().number(message=message)


def integer(*, message: str | None = None) -> IntSchema:
    return get_schemas().integer(message=message)


def double(*, message: str | None = None) -> FloatSchema:
    return get_schemas().double(message=message)


def boolean(*, message: str | None = None) -> BoolSchema:
    return get_schemas().boolean(message=message)


def date(*, message: str | None = None) -> DateSchema:
    return get_schemas().date(message=message)
