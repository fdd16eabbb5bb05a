"""Pipeline integration for schemas.

This module adapts schemas to the ``abstract_validation_base`` validator
protocol.
"""

from abstract_validation_base import CompositeValidator, ValidatorPipelineBuilder

from ryandata_schema_utils.validation.pipeline import (
    SchemaValidator,
    create_schema_pipeline,
    extract_field,
)

__all__ = [
    "CompositeValidator",
    "ValidatorPipelineBuilder",
    "SchemaValidator",
    "create_schema_pipeline",
    "extract_field",
]
