"""Schema adapters for validation pipelines.

A schema checks one value. ``SchemaValidator`` points a schema at one
field of a record (a mapping key or an attribute) so schemas can run
inside the ``abstract_validation_base`` pipeline alongside other
validators.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)

from ryandata_schema_utils.protocols import SchemaProtocol


def extract_field(item: Any, field: str) -> Any:
    """Read ``field`` from a mapping or an object; missing fields are None."""
    if isinstance(item, Mapping):
        return item.get(field)
    return getattr(item, field, None)


class SchemaValidator(BaseValidator[Any]):
    """Validates one field of a record against a schema.

    Example:
        >>> validator = SchemaValidator("age", integer().min(18))
        >>> validator.validate({"age": 12}).is_valid
        False
    """

    def __init__(
        self,
        field: str,
        schema: SchemaProtocol[Any],
        *,
        name: str | None = None,
    ) -> None:
        """Initialize the schema validator.

        Args:
            field: Mapping key or attribute name to validate.
            schema: Schema applied to the field's value.
            name: Validator name; defaults to ``schema:<field>``.
        """
        self._field = field
        self._schema = schema
        self._name = name

    @property
    def name(self) -> str:
        """Name of this validator."""
        return self._name or f"schema:{self._field}"

    @property
    def field(self) -> str:
        return self._field

    def validate(self, item: Any) -> ValidationResult:
        """Validate the configured field of ``item``.

        Args:
            item: Mapping or object holding the field.

        Returns:
            ValidationResult with at most one error, recorded on the field.
        """
        result = ValidationResult(is_valid=True)
        value = extract_field(item, self._field)
        message = self._schema.evaluate(value)
        if message is not None:
            result.add_error(self._field, message, value)
        return result


def create_schema_pipeline(
    schemas: Mapping[str, SchemaProtocol[Any]],
    name: str = "schema_validation",
) -> CompositeValidator[Any]:
    """Create a pipeline that validates several fields of a record.

    Every field is checked; errors from all fields are merged into one
    ValidationResult.

    Args:
        schemas: Field name to schema, in the order they should run.
        name: Pipeline name.

    Returns:
        CompositeValidator with one SchemaValidator per field.
    """
    builder: ValidatorPipelineBuilder[Any] = ValidatorPipelineBuilder(name)
    for field, schema in schemas.items():
        builder.add(SchemaValidator(field, schema))
    return builder.build()
