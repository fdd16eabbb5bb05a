"""Tests for the any/every combinators."""

from __future__ import annotations

from ryandata_schema_utils import AnyValidator, EveryValidator, Schemas, ValidatorKind


class TestAnyValidator:
    """Disjunction over sub-schemas."""

    def test_empty_list_never_matches(self, schemas: Schemas) -> None:
        """any([]) rejects every present value."""
        validator = AnyValidator([], message="none")
        assert validator.evaluate(1) == "none"
        assert schemas.integer().any([]).evaluate(1) == schemas.messages.integer.any

    def test_matches_when_one_sub_schema_accepts(self, schemas: Schemas) -> None:
        """A value accepted by at least one branch is valid."""
        schema = schemas.integer().any(
            [schemas.integer().positive(), schemas.integer().multiple_of(5)]
        )
        assert schema.evaluate(3) is None
        assert schema.evaluate(-10) is None
        assert schema.evaluate(-3) == "Value does not match any of the allowed schemas"

    def test_reports_only_its_own_message(self, schemas: Schemas) -> None:
        """Messages of failing sub-schemas are not surfaced."""
        schema = schemas.integer().any(
            [schemas.integer().min(10, message="too small")],
            message="no branch matched",
        )
        assert schema.evaluate(1) == "no branch matched"

    def test_kind_is_combinator(self) -> None:
        assert AnyValidator([], message="x").kind is ValidatorKind.COMBINATOR

    def test_sub_schema_list_is_copied(self, schemas: Schemas) -> None:
        """Appending to the caller's list after construction has no effect."""
        branches = [schemas.integer().min(10)]
        schema = schemas.integer().any(branches)
        branches.append(schemas.integer().max(0))
        assert schema.evaluate(-5) is not None


class TestEveryValidator:
    """Conjunction over sub-schemas."""

    def test_empty_list_always_matches(self, schemas: Schemas) -> None:
        """every([]) accepts every value."""
        assert EveryValidator([], message="x").evaluate(1) is None
        assert schemas.integer().every([]).evaluate(1) is None

    def test_requires_all_sub_schemas(self, schemas: Schemas) -> None:
        schema = schemas.integer().every(
            [schemas.integer().min(0), schemas.integer().even()],
            message="need a non-negative even number",
        )
        assert schema.evaluate(4) is None
        assert schema.evaluate(3) == "need a non-negative even number"
        assert schema.evaluate(-2) == "need a non-negative even number"

    def test_default_message(self, schemas: Schemas) -> None:
        schema = schemas.integer().every([schemas.integer().odd()])
        assert schema.evaluate(2) == "Value does not match all of the required schemas"

    def test_nested_combinators(self, schemas: Schemas) -> None:
        """Combinators compose through whole schemas."""
        small_or_even = schemas.integer().any(
            [schemas.integer().max(3), schemas.integer().even()]
        )
        schema = schemas.integer().every([small_or_even, schemas.integer().positive()])
        assert schema.validate(2)
        assert schema.validate(3)
        assert schema.validate(8)
        assert not schema.validate(7)
        assert not schema.validate(-2)


class TestCombinatorAbsence:
    """Absent values travel into sub-schemas unchanged."""

    def test_optional_outer_schema_accepts_none(self, schemas: Schemas) -> None:
        """The outer Required failure is tolerated before the combinator runs."""
        schema = schemas.integer().any([schemas.integer().optional()]).optional()
        assert schema.evaluate(None) is None

    def test_any_of_required_branches_rejects_none(self) -> None:
        validator = AnyValidator([Schemas(locale="en").integer()], message="none")
        assert validator.evaluate(None) == "none"
