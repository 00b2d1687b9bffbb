"""
Environment Reader.

Resolves one namespaced environment variable and converts its text with a
pluggable parser. Lookups distinguish three outcomes:

- ``ABSENT``: the variable is not set
- ``Present(value)``: set and parsed
- ``ParseFailure(variable, raw)``: set but rejected by the parser

The reader only reads the mapping it was given; it never modifies it.
"""

from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar, Union

from pursuit_config.errors import MissingRequiredError, ParseFailureError
from pursuit_config.parsers import Parser
from pursuit_obs.logging import get_logger

T = TypeVar("T")

DEFAULT_PREFIX = "PURSUIT_"

logger = get_logger(__name__)


class _Absent:
    """Sentinel outcome for an unset variable."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


@dataclass(frozen=True)
class Present(Generic[T]):
    value: T


@dataclass(frozen=True)
class ParseFailure:
    variable: str
    raw: str

    def to_error(self) -> ParseFailureError:
        return ParseFailureError(self.variable, self.raw)


Lookup = Union[_Absent, Present[Any], ParseFailure]


class EnvironmentReader:
    """Reads typed values from a read-only environment mapping.

    Every name is prefixed with the application namespace before lookup so
    unrelated host variables (``PORT``, ``HOST``) are never picked up.
    """

    def __init__(self, environ: Mapping[str, str], prefix: str = DEFAULT_PREFIX):
        """Initialize reader.

        Args:
            environ: Raw environment, usually ``os.environ``
            prefix: Namespace token prepended to every variable name
        """
        self.environ = environ
        self.prefix = prefix

    def qualify(self, name: str) -> str:
        """Full variable name for a logical setting name."""
        return f"{self.prefix}{name}"

    def lookup_optional(self, name: str, parse: Parser[T]) -> Lookup:
        """Resolve a variable without treating absence as an error."""
        variable = self.qualify(name)
        raw = self.environ.get(variable)

        if raw is None:
            logger.debug("config.lookup", variable=variable, outcome="absent")
            return ABSENT

        try:
            value = parse(raw)
        except ValueError:
            logger.debug("config.lookup", variable=variable, outcome="parse_failure")
            return ParseFailure(variable, raw)

        logger.debug("config.lookup", variable=variable, outcome="present")
        return Present(value)

    def lookup_required(self, name: str, parse: Parser[T]) -> T:
        """Resolve a variable that must be set and well-formed.

        Raises:
            MissingRequiredError: Variable is not set
            ParseFailureError: Variable text was rejected by ``parse``
        """
        result = self.lookup_optional(name, parse)

        if isinstance(result, Present):
            return result.value
        if isinstance(result, ParseFailure):
            raise result.to_error()
        raise MissingRequiredError(self.qualify(name))
