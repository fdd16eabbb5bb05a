from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import pandas as pd

    from ryandata_schema_utils.protocols import SchemaProtocol


def _as_value(value: Any) -> Any:
    """Map pandas missing markers (NaN, NaT, None, NA) to None."""
    import pandas as pd

    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        # Array-like cells are never "missing" as a whole.
        pass
    return value


def evaluate_series(series: pd.Series, schema: SchemaProtocol[Any]) -> pd.Series:
    """Evaluate every element of a Series against a schema.

    Args:
        series: Values to check.
        schema: Schema applied to each element.

    Returns:
        Series (same index, object dtype) of error messages, None where valid.
    """
    import pandas as pd

    return pd.Series(
        [schema.evaluate(_as_value(v)) for v in series],
        index=series.index,
        name=series.name,
        dtype=object,
    )


def validate_series(series: pd.Series, schema: SchemaProtocol[Any]) -> pd.Series:
    """Boolean mask of the elements of ``series`` that satisfy ``schema``."""
    return evaluate_series(series, schema).isna().rename(series.name)


class SchemaAccessor:
    """Pandas accessor for schema evaluation.

    Usage:
        >>> from ryandata_schema_utils.pandas_ext import register_accessor
        >>> register_accessor()
        >>> df = pd.DataFrame({"age": [12, 30, None]})
        >>> df["age"].schema.validate(number().min(18).nullable())
    """

    def __init__(self, pandas_obj: pd.Series) -> None:
        """Initialize the accessor.

        Args:
            pandas_obj: The pandas Series this accessor is attached to.
        """
        self._obj = pandas_obj

    def evaluate(self, schema: SchemaProtocol[Any]) -> pd.Series:
        """Error message per element, None where valid."""
        return evaluate_series(self._obj, schema)

    def validate(self, schema: SchemaProtocol[Any]) -> pd.Series:
        """True per element that satisfies the schema."""
        return validate_series(self._obj, schema)

    def errors(self, schema: SchemaProtocol[Any]) -> pd.Series:
        """Only the failing elements, mapped to their messages."""
        messages = evaluate_series(self._obj, schema)
        return messages[messages.notna()]


def register_accessor(name: str = "schema") -> None:
    """Register the schema accessor on pandas Series.

    After calling this, you can use:
        >>> series.schema.validate(schema)

    Args:
        name: Name for the accessor (default: "schema").
    """
    import pandas as pd

    if not hasattr(pd.Series, name):
        pd.api.extensions.register_series_accessor(name)(SchemaAccessor)
