"""Value parsers for environment variables.

A parser takes the raw text of a variable and returns the typed value, raising
``ValueError`` when the text is rejected. String-like values go through
``lenient`` so shells need not quote them; numbers and booleans are strict.
"""

import json
from datetime import timedelta
from typing import Annotated, Callable, TypeVar

from pydantic import SecretStr, StringConstraints, TypeAdapter

from pursuit_config.types import HostPreference, SemanticVersion

T = TypeVar("T")
U = TypeVar("U")

Parser = Callable[[str], T]

# Decimal digits with an optional sign; "3000.0" and "3_000" are not integers.
_INT_TEXT = TypeAdapter(
    Annotated[str, StringConstraints(strip_whitespace=True, pattern=r"^[+-]?[0-9]+$")]
)
_BOOL = TypeAdapter(bool)


def parse_string_literal(text: str) -> str:
    """Parse a double-quoted string literal such as ``"./static"``."""
    value = json.loads(text)
    if not isinstance(value, str):
        raise ValueError(f"not a string literal: {text!r}")
    return value


def lenient(parse: Parser[T]) -> Parser[T]:
    """Retry a failed literal parse with the raw text wrapped in quotes.

    ``http://localhost:3000`` and ``"http://localhost:3000"`` both parse to
    the same value. Text that fails both attempts is rejected.
    """

    def parse_lenient(text: str) -> T:
        try:
            return parse(text)
        except ValueError:
            return parse(f'"{text}"')

    return parse_lenient


def mapped(parse: Parser[T], convert: Callable[[T], U]) -> Parser[U]:
    """Post-process a parsed value. ``convert`` may raise ValueError."""

    def parse_mapped(text: str) -> U:
        return convert(parse(text))

    return parse_mapped


parse_string = lenient(parse_string_literal)


def parse_int(text: str) -> int:
    """Strict integer parse. Quoted, fractional and underscored numbers are rejected."""
    return int(_INT_TEXT.validate_python(text))


def parse_non_negative_int(text: str) -> int:
    value = parse_int(text)
    if value < 0:
        raise ValueError(f"expected a non-negative integer, got {value}")
    return value


def parse_bool(text: str) -> bool:
    """Strict boolean parse (true/false, yes/no, on/off, 1/0)."""
    return _BOOL.validate_python(text)


def parse_seconds(text: str) -> timedelta:
    """Whole seconds to a duration."""
    return timedelta(seconds=parse_non_negative_int(text))


def parse_version(text: str) -> SemanticVersion:
    return SemanticVersion.parse(text)


parse_host_preference = mapped(parse_string, HostPreference.from_string)

# Opaque wrapper; the secret text never shows up in repr() or logs.
parse_secret = mapped(parse_string, SecretStr)
