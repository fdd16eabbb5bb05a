"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import pytest
from hypothesis import Verbosity, settings

from ryandata_schema_utils import Schemas, SchemaFactory
from ryandata_schema_utils.core.config import CASE_SENSITIVITY_ENV, LOCALE_ENV

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the facade defaults independent of the developer's shell."""
    monkeypatch.delenv(LOCALE_ENV, raising=False)
    monkeypatch.delenv(CASE_SENSITIVITY_ENV, raising=False)


@pytest.fixture
def schemas() -> Schemas:
    """English facade with default configuration."""
    return Schemas(locale="en")


@pytest.fixture
def restore_factory():
    """Restore the SchemaFactory registry after a test mutates it."""
    saved = dict(SchemaFactory._registry)
    yield SchemaFactory
    SchemaFactory._registry.clear()
    SchemaFactory._registry.update(saved)
