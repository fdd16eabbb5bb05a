"""Shared Hypothesis strategies for schema testing.

This module provides reusable Hypothesis strategies for generating
candidate values, constraint chains and string case variants for
property-based testing.
"""

from __future__ import annotations

from datetime import date

import hypothesis.strategies as st

# =============================================================================
# Constants
# =============================================================================

PASSWORDS = [
    "password123",
    "hunter2",
    "correct horse battery staple",
    "Tr0ub4dor&3",
    "letmein",
]

NUMERIC_METHODS = ["min", "max", "positive", "negative", "multiple_of"]

# =============================================================================
# Value Strategies
# =============================================================================


@st.composite
def present_value_strategy(draw: st.DrawFn) -> object:
    """Generate any non-None value, including falsy ones."""
    return draw(
        st.one_of(
            st.integers(),
            st.floats(allow_nan=False),
            st.text(max_size=20),
            st.booleans(),
            st.just(0),
            st.just(""),
            st.just(False),
            st.lists(st.integers(), max_size=3),
        )
    )


@st.composite
def small_int_strategy(draw: st.DrawFn) -> int:
    return draw(st.integers(min_value=-1000, max_value=1000))


@st.composite
def message_strategy(draw: st.DrawFn) -> str:
    """Generate distinct, printable custom messages."""
    return draw(st.text(alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZ ", min_size=1, max_size=20))


@st.composite
def date_strategy(draw: st.DrawFn) -> date:
    return draw(st.dates(min_value=date(1900, 1, 1), max_value=date(2100, 12, 31)))


# =============================================================================
# Constraint Chain Strategies
# =============================================================================


@st.composite
def numeric_constraint_strategy(draw: st.DrawFn) -> tuple[str, int | None]:
    """Generate one (method, argument) pair for an integer schema."""
    method = draw(st.sampled_from(NUMERIC_METHODS))
    if method in ("positive", "negative"):
        return method, None
    if method == "multiple_of":
        return method, draw(st.integers(min_value=1, max_value=12))
    return method, draw(small_int_strategy())


@st.composite
def numeric_chain_strategy(draw: st.DrawFn) -> list[tuple[str, int | None]]:
    """Generate a sequence of constraints to chain on an integer schema."""
    return draw(st.lists(numeric_constraint_strategy(), min_size=0, max_size=6))


# =============================================================================
# String Variant Strategies
# =============================================================================


@st.composite
def case_variant_strategy(draw: st.DrawFn, base: str) -> str:
    """Flip the case of arbitrary characters of ``base``."""
    flips = draw(st.lists(st.booleans(), min_size=len(base), max_size=len(base)))
    return "".join(ch.swapcase() if flip else ch for ch, flip in zip(base, flips, strict=True))


@st.composite
def password_variant_strategy(draw: st.DrawFn) -> tuple[str, str]:
    """Generate a known password and a case variant of it."""
    password = draw(st.sampled_from(PASSWORDS))
    return password, draw(case_variant_strategy(password))
