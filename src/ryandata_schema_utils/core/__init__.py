"""RyanData Schema Utils Core - errors and configuration.

Usage:
    from ryandata_schema_utils.core import (
        PACKAGE_NAME,
        SchemaConfig,
        SchemaError,
        SchemaValidationError,
    )
"""

from __future__ import annotations

from ryandata_schema_utils.core.config import SchemaConfig
from ryandata_schema_utils.core.errors import PACKAGE_NAME, SchemaError, SchemaValidationError

__all__ = [
    "PACKAGE_NAME",
    "SchemaConfig",
    "SchemaError",
    "SchemaValidationError",
]
