"""Environment-backed configuration for the schema facade."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from ryandata_schema_utils.enums import CaseSensitivity

LOCALE_ENV = "RYANDATA_SCHEMA_LOCALE"
CASE_SENSITIVITY_ENV = "RYANDATA_SCHEMA_CASE_SENSITIVITY"


def _env_case_sensitivity() -> CaseSensitivity:
    value = os.getenv(CASE_SENSITIVITY_ENV, CaseSensitivity.SENSITIVE.value).strip().lower()
    try:
        return CaseSensitivity(value)
    except ValueError:
        return CaseSensitivity.SENSITIVE


@dataclass
class SchemaConfig:
    """Defaults applied by ``Schemas`` when the caller does not pass them.

    Attributes:
        locale: Name of the registered message set (``RYANDATA_SCHEMA_LOCALE``).
        case_sensitivity: Default mode for string comparisons
            (``RYANDATA_SCHEMA_CASE_SENSITIVITY``).
    """

    locale: str = field(default_factory=lambda: os.getenv(LOCALE_ENV, "en"))
    case_sensitivity: CaseSensitivity = field(default_factory=_env_case_sensitivity)
