"""Locale message sets.

A ``MessageSet`` bundles one message container per schema category. Sets
are registered by locale name; ``"en"`` is the default.
"""

from __future__ import annotations

from ryandata_schema_utils.core.errors import SchemaError
from ryandata_schema_utils.messages.base import MessageContainer
from ryandata_schema_utils.messages.boolean import BoolMessages
from ryandata_schema_utils.messages.date import DateMessages
from ryandata_schema_utils.messages.number import FloatMessages, IntMessages, NumberMessages
from ryandata_schema_utils.messages.string import StringMessages

DEFAULT_LOCALE = "en"


class MessageSet(MessageContainer):
    """Message containers for every schema category."""

    string: StringMessages = StringMessages()
    number: NumberMessages = NumberMessages()
    integer: IntMessages = IntMessages()
    floating: FloatMessages = FloatMessages()
    boolean: BoolMessages = BoolMessages()
    date: DateMessages = DateMessages()


def _pt_br() -> MessageSet:
    shared = {
        "required": "Campo obrigatório",
        "refine": "Valor inválido",
        "any": "O valor não corresponde a nenhum dos esquemas permitidos",
        "every": "O valor não corresponde a todos os esquemas exigidos",
    }
    number = {
        **shared,
        "min": lambda minimum: f"Deve ser maior ou igual a {minimum}",
        "max": lambda maximum: f"Deve ser menor ou igual a {maximum}",
        "between": lambda minimum, maximum: f"Deve estar entre {minimum} e {maximum}",
        "multiple_of": lambda factor: f"Deve ser múltiplo de {factor}",
        "positive": "Deve ser um número positivo",
        "negative": "Deve ser um número negativo",
    }
    return MessageSet(
        string=StringMessages().copy_with(
            **shared,
            equals=lambda expected: f'Deve ser igual a "{expected}"',
            contains=lambda part: f'Deve conter "{part}"',
            starts_with=lambda prefix: f'Deve começar com "{prefix}"',
            ends_with=lambda suffix: f'Deve terminar com "{suffix}"',
            min=lambda length: f"Deve ter pelo menos {length} caracteres",
            max=lambda length: f"Deve ter no máximo {length} caracteres",
            length=lambda minimum, maximum: f"Deve ter entre {minimum} e {maximum} caracteres",
            pattern=lambda pattern: f"Deve corresponder ao padrão {pattern}",
            email="Deve ser um e-mail válido",
            url="Deve ser uma URL válida",
            uuid="Deve ser um UUID válido",
            not_empty="Não pode estar vazio",
        ),
        number=NumberMessages().copy_with(**number),
        integer=IntMessages().copy_with(
            **number, odd="Deve ser um número ímpar", even="Deve ser um número par"
        ),
        floating=FloatMessages().copy_with(**number, finite="Deve ser um número finito"),
        boolean=BoolMessages().copy_with(
            **shared, is_true="Deve ser verdadeiro", is_false="Deve ser falso"
        ),
        date=DateMessages().copy_with(
            **shared,
            after=lambda limit: f"Deve ser posterior a {limit.isoformat()}",
            before=lambda limit: f"Deve ser anterior a {limit.isoformat()}",
            between=lambda start, end: (
                f"Deve estar entre {start.isoformat()} e {end.isoformat()}"
            ),
        ),
    )


MESSAGE_SETS: dict[str, MessageSet] = {
    DEFAULT_LOCALE: MessageSet(),
    "pt_BR": _pt_br(),
}


def get_message_set(locale: str | None = None) -> MessageSet:
    """Get the message set registered for a locale.

    Args:
        locale: Locale name. If None, uses the default locale.

    Returns:
        The registered MessageSet.

    Raises:
        SchemaError: If no message set is registered for the locale.
    """
    name = locale or DEFAULT_LOCALE
    if name not in MESSAGE_SETS:
        raise SchemaError.create(
            "unknown_locale",
            "No message set registered for locale {locale}. Available: {available}",
            {"locale": name, "available": ", ".join(sorted(MESSAGE_SETS))},
        )
    return MESSAGE_SETS[name]


def register_message_set(locale: str, messages: MessageSet) -> None:
    """Register (or replace) the message set for a locale."""
    MESSAGE_SETS[locale] = messages


def available_locales() -> list[str]:
    return sorted(MESSAGE_SETS)
