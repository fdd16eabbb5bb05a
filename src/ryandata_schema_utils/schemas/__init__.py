"""Schema nodes and typed builders."""

from ryandata_schema_utils.schemas.base import Schema, TypedSchema
from ryandata_schema_utils.schemas.boolean import BoolSchema
from ryandata_schema_utils.schemas.date import DateSchema
from ryandata_schema_utils.schemas.number import (
    FloatSchema,
    IntSchema,
    NumberSchema,
    NumericSchema,
)
from ryandata_schema_utils.schemas.string import StringSchema

__all__ = [
    "Schema",
    "TypedSchema",
    "NumericSchema",
    "NumberSchema",
    "IntSchema",
    "FloatSchema",
    "StringSchema",
    "BoolSchema",
    "DateSchema",
]
