from __future__ import annotations

from datetime import date
from typing import Any, Optional

import typer

from ryandata_schema_utils.core.errors import SchemaError
from ryandata_schema_utils.enums import SchemaKind
from ryandata_schema_utils.factory import SchemaFactory
from ryandata_schema_utils.messages.locales import MessageSet, get_message_set

app = typer.Typer(help="Check values against schemas from the command line.")

_TRUE = {"true", "1", "yes", "y"}
_FALSE = {"false", "0", "no", "n"}


def parse_value(kind: str, raw: str) -> Any:
    """Convert a command-line string into the value type of a schema kind.

    Raises:
        typer.BadParameter: If the string cannot be converted.
    """
    try:
        if kind == SchemaKind.INT.value:
            return int(raw)
        if kind in (SchemaKind.NUMBER.value, SchemaKind.FLOAT.value):
            return float(raw)
        if kind == SchemaKind.DATE.value:
            return date.fromisoformat(raw)
    except ValueError as exc:
        raise typer.BadParameter(f"Cannot read {raw!r} as {kind}: {exc}") from exc
    if kind == SchemaKind.BOOL.value:
        lowered = raw.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise typer.BadParameter(f"Cannot read {raw!r} as bool")
    return raw


def _bound(kind: str, raw: Optional[str]) -> Any:
    return None if raw is None else parse_value(kind, raw)


def _reject_unsupported(kind: str, **options: Optional[str]) -> None:
    """Raise SchemaError for options the schema kind has no constraint for."""
    if kind == SchemaKind.BOOL.value:
        supported: set[str] = set()
    elif kind == SchemaKind.STRING.value:
        supported = {"minimum", "maximum", "pattern"}
    else:
        supported = {"minimum", "maximum"}
    flags = {"minimum": "--min", "maximum": "--max", "pattern": "--pattern"}
    unsupported = [
        flags[name]
        for name, raw in options.items()
        if raw is not None and name not in supported
    ]
    if unsupported:
        raise SchemaError.create(
            "unsupported_option",
            "Option(s) {options} not supported for type {kind}",
            {"options": ", ".join(unsupported), "kind": kind},
        )


@app.command()
def check(
    value: Optional[str] = typer.Argument(  # noqa: B008
        None,
        help="Value to check. Omit it to check an absent value.",
    ),
    kind: SchemaKind = typer.Option(  # noqa: B008
        SchemaKind.STRING,
        "--type",
        "-t",
        help="Schema type.",
    ),
    minimum: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--min",
        help="Minimum (numbers, dates) or minimum length (strings).",
    ),
    maximum: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--max",
        help="Maximum (numbers, dates) or maximum length (strings).",
    ),
    pattern: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--pattern",
        help="Regular expression the whole string must match.",
    ),
    optional: bool = typer.Option(  # noqa: B008
        False,
        "--optional",
        help="Accept an absent value.",
    ),
    nullable: bool = typer.Option(  # noqa: B008
        False,
        "--nullable",
        help="Accept a null value.",
    ),
    locale: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--locale",
        help="Message locale (defaults to RYANDATA_SCHEMA_LOCALE or 'en').",
    ),
) -> None:
    """Build a schema from options and check one value against it."""
    kind_name = kind.value
    try:
        _reject_unsupported(kind_name, minimum=minimum, maximum=maximum, pattern=pattern)
        schema: Any = SchemaFactory.create(kind_name, locale=locale)
        if kind_name == SchemaKind.STRING.value:
            if minimum is not None:
                schema.min(int(minimum))
            if maximum is not None:
                schema.max(int(maximum))
            if pattern is not None:
                schema.pattern(pattern)
        elif kind_name == SchemaKind.DATE.value:
            start, end = _bound(kind_name, minimum), _bound(kind_name, maximum)
            if start is not None and end is not None:
                schema.between(start, end)
            elif start is not None:
                schema.after(start)
            elif end is not None:
                schema.before(end)
        elif kind_name != SchemaKind.BOOL.value:
            if minimum is not None:
                schema.min(parse_value(kind_name, minimum))
            if maximum is not None:
                schema.max(parse_value(kind_name, maximum))
    except (SchemaError, ValueError) as exc:
        typer.echo(f"Invalid schema: {exc}")
        raise typer.Exit(code=2) from exc

    if optional:
        schema.optional()
    if nullable:
        schema.nullable()

    candidate = None if value is None else parse_value(kind_name, value)
    message = schema.evaluate(candidate)
    if message is None:
        typer.echo("valid")
        raise typer.Exit(code=0)
    typer.echo(f"invalid: {message}")
    raise typer.Exit(code=1)


@app.command()
def messages(
    category: str = typer.Argument(  # noqa: B008
        "string",
        help="Message category (string, number, integer, floating, boolean, date).",
    ),
    locale: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--locale",
        help="Message locale.",
    ),
) -> None:
    """Print the default messages of a category."""
    if category not in MessageSet.model_fields:
        typer.echo(f"Unknown category: {category}. Available: {', '.join(MessageSet.kinds())}")
        raise typer.Exit(code=2)
    try:
        container = getattr(get_message_set(locale), category)
    except SchemaError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=2) from exc

    for kind in container.kinds():
        text = getattr(container, kind)
        typer.echo(f"{kind}: {'<formatted>' if callable(text) else text}")


@app.command()
def types() -> None:
    """List the registered schema types."""
    for name in SchemaFactory.available_types():
        typer.echo(name)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
