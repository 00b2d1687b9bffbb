"""Value types carried by the settings record."""

import re
from dataclasses import dataclass

_VERSION_RE = re.compile(r"^(\d+(?:\.\d+)*)((?:-[A-Za-z0-9]+)*)$")


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """A dotted numeric version with optional dash-separated tags.

    Textual form is ``2.3.1`` or ``0.12.0-rc1``. Versions order by their
    numeric branch first, then by tags.
    """

    branch: tuple[int, ...]
    tags: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        """Parse the textual form, raising ValueError on malformed input."""
        match = _VERSION_RE.match(text.strip())
        if match is None:
            raise ValueError(f"invalid version: {text!r}")
        branch = tuple(int(part) for part in match.group(1).split("."))
        tags = tuple(tag for tag in match.group(2).split("-") if tag)
        return cls(branch, tags)

    def __str__(self) -> str:
        return "-".join([".".join(str(n) for n in self.branch), *self.tags])


ZERO_VERSION = SemanticVersion((0, 0, 0, 0))


@dataclass(frozen=True)
class HostPreference:
    """Which interface the server should bind to.

    Special forms:
    - ``*``  any interface
    - ``*4`` any interface, IPv4 preferred
    - ``!4`` IPv4 only
    - ``*6`` any interface, IPv6 preferred
    - ``!6`` IPv6 only

    Anything else names a concrete host.
    """

    value: str

    IPV4_FORMS = frozenset({"*", "*4", "!4"})
    IPV6_FORMS = frozenset({"*6", "!6"})

    @classmethod
    def from_string(cls, text: str) -> "HostPreference":
        if not text:
            raise ValueError("host preference must not be empty")
        return cls(text)

    @property
    def is_wildcard(self) -> bool:
        return self.value in self.IPV4_FORMS or self.value in self.IPV6_FORMS

    def bind_address(self) -> str:
        """Address handed to the server socket."""
        if self.value in self.IPV4_FORMS:
            return "0.0.0.0"
        if self.value in self.IPV6_FORMS:
            return "::"
        return self.value

    def __str__(self) -> str:
        return self.value
