"""Default messages for string schemas."""

from __future__ import annotations

from collections.abc import Callable

from ryandata_schema_utils.messages.base import BaseMessages


class StringMessages(BaseMessages):
    equals: Callable[[str], str] = lambda expected: f'Must be equal to "{expected}"'
    contains: Callable[[str], str] = lambda part: f'Must contain "{part}"'
    starts_with: Callable[[str], str] = lambda prefix: f'Must start with "{prefix}"'
    ends_with: Callable[[str], str] = lambda suffix: f'Must end with "{suffix}"'
    min: Callable[[int], str] = lambda length: f"Must be at least {length} characters long"
    max: Callable[[int], str] = lambda length: f"Must be at most {length} characters long"
    length: Callable[[int, int], str] = (
        lambda minimum, maximum: f"Must be between {minimum} and {maximum} characters long"
    )
    pattern: Callable[[str], str] = lambda pattern: f"Must match the pattern {pattern}"
    email: str = "Must be a valid email address"
    url: str = "Must be a valid URL"
    uuid: str = "Must be a valid UUID"
    not_empty: str = "Must not be empty"
