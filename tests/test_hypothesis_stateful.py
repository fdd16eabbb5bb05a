"""Stateful property-based tests using Hypothesis for the fluent builders.

This module uses Hypothesis's RuleBasedStateMachine to drive arbitrary
sequences of builder calls and compares the schema against a simple
reference model after every step.
"""

from __future__ import annotations

from collections.abc import Callable

import hypothesis.strategies as st
from hypothesis import HealthCheck, settings
from hypothesis.stateful import RuleBasedStateMachine, invariant, precondition, rule

from ryandata_schema_utils import IntSchema, Schemas

PROBES = [None, -12, -3, -1, 0, 1, 2, 5, 7, 10, 12, 30]

# =============================================================================
# IntSchema Builder State Machine
# =============================================================================


class IntSchemaStateMachine(RuleBasedStateMachine):
    """State machine for testing the IntSchema fluent API.

    The reference model is the ordered list of (predicate, message) pairs
    the builder should hold, plus the two flags.
    """

    def __init__(self) -> None:
        super().__init__()
        self.schemas = Schemas(locale="en")
        self.schema: IntSchema = self.schemas.integer()
        self.model: list[tuple[Callable[[int], bool], str]] = []
        self.optional = False
        self.nullable = False

    def _expect(self, value: int | None) -> str | None:
        if value is None:
            if self.nullable or self.optional:
                return None
            return "This field is required"
        for predicate, message in self.model:
            if not predicate(value):
                return message
        return None

    # =========================================================================
    # Rules for adding constraints
    # =========================================================================

    @rule(minimum=st.integers(min_value=-20, max_value=20))
    def add_min(self, minimum: int) -> None:
        """Chain a minimum."""
        assert self.schema.min(minimum) is self.schema
        self.model.append(
            (lambda v, m=minimum: v >= m, f"Must be greater than or equal to {minimum}")
        )

    @rule(maximum=st.integers(min_value=-20, max_value=20))
    def add_max(self, maximum: int) -> None:
        """Chain a maximum."""
        self.schema.max(maximum)
        self.model.append((lambda v, m=maximum: v <= m, f"Must be less than or equal to {maximum}"))

    @rule(factor=st.integers(min_value=1, max_value=6))
    def add_multiple_of(self, factor: int) -> None:
        self.schema.multiple_of(factor)
        self.model.append((lambda v, f=factor: v % f == 0, f"Must be a multiple of {factor}"))

    @rule()
    def add_even(self) -> None:
        self.schema.even()
        self.model.append((lambda v: v % 2 == 0, "Must be an even number"))

    @rule(message=st.sampled_from(["A", "B", "C"]))
    def add_refine(self, message: str) -> None:
        """Chain a custom check with an explicit message."""
        self.schema.refine(lambda v: v != 7, message=message)
        self.model.append((lambda v: v != 7, message))

    # =========================================================================
    # Rules for flags
    # =========================================================================

    @precondition(lambda self: not self.optional)
    @rule()
    def make_optional(self) -> None:
        assert self.schema.optional() is self.schema
        self.optional = True

    @precondition(lambda self: not self.nullable)
    @rule()
    def make_nullable(self) -> None:
        assert self.schema.nullable() is self.schema
        self.nullable = True

    # =========================================================================
    # Reset rule
    # =========================================================================

    @rule()
    def reset_schema(self) -> None:
        """Start over with a fresh builder."""
        self.schema = self.schemas.integer()
        self.model.clear()
        self.optional = False
        self.nullable = False

    # =========================================================================
    # Invariants
    # =========================================================================

    @invariant()
    def matches_reference_model(self) -> None:
        """Every probe value gets the message the model predicts."""
        for value in PROBES:
            assert self.schema.evaluate(value) == self._expect(value), f"value={value!r}"

    @invariant()
    def holds_required_plus_constraints(self) -> None:
        assert len(self.schema.validators) == len(self.model) + 1
        assert self.schema.is_optional == self.optional
        assert self.schema.is_nullable == self.nullable


# Create pytest test case
TestIntSchemaBuilder = IntSchemaStateMachine.TestCase
TestIntSchemaBuilder.settings = settings(
    max_examples=100,
    stateful_step_count=20,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
