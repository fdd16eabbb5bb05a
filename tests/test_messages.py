"""Tests for message containers and locale message sets."""

from __future__ import annotations

import pydantic
import pytest

from ryandata_schema_utils import (
    IntMessages,
    MessageSet,
    NumberMessages,
    SchemaError,
    Schemas,
    StringMessages,
    available_locales,
    get_message_set,
    register_message_set,
)
from ryandata_schema_utils.messages.locales import MESSAGE_SETS


class TestCopyWith:
    """Derived containers never mutate the original."""

    def test_overrides_one_entry(self) -> None:
        original = IntMessages()
        derived = original.copy_with(odd="odd please")
        assert derived.odd == "odd please"
        assert original.odd == "Must be an odd number"
        assert derived.even == original.even

    def test_preserves_container_type(self) -> None:
        assert type(IntMessages().copy_with(required="x")) is IntMessages

    def test_none_values_are_ignored(self) -> None:
        assert StringMessages().copy_with(email=None).email == "Must be a valid email address"

    def test_unknown_kind_raises(self) -> None:
        with pytest.raises(SchemaError) as exc_info:
            NumberMessages().copy_with(odd="nope")
        assert exc_info.value.type == "unknown_message_kind"

    def test_wrong_shape_raises(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            NumberMessages().copy_with(positive=123)

    def test_containers_are_frozen(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            NumberMessages().positive = "changed"  # type: ignore[misc]

    def test_kinds_lists_fields(self) -> None:
        assert {"required", "refine", "any", "every", "min", "odd"} <= set(IntMessages.kinds())


class TestResolve:
    def test_formats_parameterized_message(self) -> None:
        assert NumberMessages().resolve("between", 1, 2) == "Must be between 1 and 2"

    def test_returns_literal_message(self) -> None:
        assert NumberMessages().resolve("positive") == "Must be a positive number"


class TestLocales:
    def test_default_locale_is_english(self) -> None:
        assert get_message_set() is MESSAGE_SETS["en"]
        assert "pt_BR" in available_locales()

    def test_portuguese_defaults(self) -> None:
        schemas = Schemas(locale="pt_BR")
        assert schemas.integer().evaluate(None) == "Campo obrigatório"
        assert schemas.integer().min(5).evaluate(1) == "Deve ser maior ou igual a 5"

    def test_unknown_locale_raises(self) -> None:
        with pytest.raises(SchemaError) as exc_info:
            get_message_set("xx")
        assert exc_info.value.type == "unknown_locale"

    def test_locale_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RYANDATA_SCHEMA_LOCALE", "pt_BR")
        assert Schemas().boolean().is_true().evaluate(False) == "Deve ser verdadeiro"

    def test_register_message_set(self, monkeypatch: pytest.MonkeyPatch) -> None:
        # setitem first so monkeypatch removes the locale afterwards
        monkeypatch.setitem(MESSAGE_SETS, "shout", MessageSet())
        register_message_set(
            "shout", MessageSet(string=StringMessages().copy_with(required="REQUIRED!"))
        )
        assert Schemas(locale="shout").string().evaluate(None) == "REQUIRED!"
        assert Schemas(locale="shout").integer().evaluate(None) == "This field is required"


class TestFacadeMessages:
    def test_with_messages_returns_new_facade(self, schemas: Schemas) -> None:
        custom = schemas.with_messages(
            boolean=schemas.messages.boolean.copy_with(required="Please choose")
        )
        assert custom.boolean().evaluate(None) == "Please choose"
        assert schemas.boolean().evaluate(None) == "This field is required"

    def test_with_messages_rejects_unknown_category(self, schemas: Schemas) -> None:
        with pytest.raises(SchemaError):
            schemas.with_messages(colour=StringMessages())
