"""ryandata-schema-utils: composable value schemas with readable error messages.

This package provides:
- Fluent, typed schema builders (string, number, int, float, bool, date)
- Optional / nullable semantics and ordered, short-circuit evaluation
- ``any`` / ``every`` combinators over whole sub-schemas
- Locale-aware default messages with per-call overrides
- Pipeline and pandas integration

Quick Start:
    >>> from ryandata_schema_utils import number, string
    >>> schema = number().min(5).max(10).multiple_of(2)
    >>> schema.evaluate(4)
    'Must be greater than or equal to 5'
    >>> schema.evaluate(6) is None
    True

    # Optional values
    >>> string().email().optional().validate(None)
    True

    # Combinators
    >>> from ryandata_schema_utils import integer
    >>> schema = integer().any([integer().positive(), integer().multiple_of(5)])
    >>> schema.validate(-10)
    True

    # Custom messages and locales
    >>> from ryandata_schema_utils import Schemas
    >>> Schemas(locale="pt_BR").integer().evaluate(None)
    'Campo obrigatório'
"""

from __future__ import annotations

from ryandata_schema_utils.core import (
    PACKAGE_NAME,
    SchemaConfig,
    SchemaError,
    SchemaValidationError,
)
from ryandata_schema_utils.enums import SCHEMA_KINDS, CaseSensitivity, SchemaKind, ValidatorKind
from ryandata_schema_utils.factory import (
    SchemaFactory,
    Schemas,
    boolean,
    date,
    double,
    get_schemas,
    integer,
    number,
    string,
)
from ryandata_schema_utils.messages import (
    BaseMessages,
    BoolMessages,
    DateMessages,
    FloatMessages,
    IntMessages,
    MessageSet,
    NumberMessages,
    StringMessages,
    available_locales,
    get_message_set,
    register_message_set,
)
from ryandata_schema_utils.pandas_ext import (
    evaluate_series,
    register_accessor,
    validate_series,
)
from ryandata_schema_utils.protocols import EvaluatorProtocol, SchemaProtocol
from ryandata_schema_utils.schemas import (
    BoolSchema,
    DateSchema,
    FloatSchema,
    IntSchema,
    NumberSchema,
    NumericSchema,
    Schema,
    StringSchema,
    TypedSchema,
)
from ryandata_schema_utils.validation import SchemaValidator, create_schema_pipeline
from ryandata_schema_utils.validators import (
    AnyValidator,
    EveryValidator,
    MessageValidator,
    PredicateValidator,
    RequiredValidator,
    Validator,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Errors and configuration
    "PACKAGE_NAME",
    "SchemaConfig",
    "SchemaError",
    "SchemaValidationError",
    # Enums
    "CaseSensitivity",
    "SchemaKind",
    "SCHEMA_KINDS",
    "ValidatorKind",
    # Factories
    "SchemaFactory",
    "Schemas",
    "get_schemas",
    "string",
    "number",
    "integer",
    "double",
    "boolean",
    "date",
    # Schemas
    "Schema",
    "TypedSchema",
    "NumericSchema",
    "NumberSchema",
    "IntSchema",
    "FloatSchema",
    "StringSchema",
    "BoolSchema",
    "DateSchema",
    # Validators
    "Validator",
    "MessageValidator",
    "RequiredValidator",
    "PredicateValidator",
    "AnyValidator",
    "EveryValidator",
    # Messages
    "BaseMessages",
    "NumberMessages",
    "IntMessages",
    "FloatMessages",
    "StringMessages",
    "BoolMessages",
    "DateMessages",
    "MessageSet",
    "available_locales",
    "get_message_set",
    "register_message_set",
    # Protocols
    "EvaluatorProtocol",
    "SchemaProtocol",
    # Integrations
    "SchemaValidator",
    "create_schema_pipeline",
    "evaluate_series",
    "validate_series",
    "register_accessor",
]
