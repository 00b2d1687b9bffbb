"""
Configuration Schema.

One ``ConfigField`` per environment-sourced setting. The variable names are
un-prefixed here; the reader adds the ``PURSUIT_`` namespace.
"""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Optional

from pursuit_config.parsers import (
    Parser,
    parse_bool,
    parse_host_preference,
    parse_int,
    parse_seconds,
    parse_secret,
    parse_string,
    parse_version,
)
from pursuit_config.types import HostPreference, ZERO_VERSION


class FieldKind(str, Enum):
    REQUIRED = "required"
    OPTIONAL_WITH_DEFAULT = "optional_with_default"
    OPTIONAL_NO_DEFAULT = "optional_no_default"


@dataclass(frozen=True)
class ConfigField:
    """A named, typed configuration slot."""

    attr: str
    name: str
    kind: FieldKind
    parser: Parser[Any]
    default: Any = None
    # Emitted once when an optional field resolves to nothing.
    absent_advisory: Optional[str] = None


GITHUB_TOKEN_ADVISORY = (
    "No GitHub auth token configured. Requests to the GitHub API will be "
    "performed with no authentication, which will often result in rate limiting."
)

CONFIG_SCHEMA: tuple[ConfigField, ...] = (
    ConfigField(
        attr="static_dir",
        name="STATIC_DIR",
        kind=FieldKind.OPTIONAL_WITH_DEFAULT,
        parser=parse_string,
        default="./static",
    ),
    ConfigField(
        attr="app_root",
        name="APPROOT",
        kind=FieldKind.OPTIONAL_WITH_DEFAULT,
        parser=parse_string,
        default="http://localhost:3000",
    ),
    ConfigField(
        attr="host",
        name="HOST",
        kind=FieldKind.OPTIONAL_WITH_DEFAULT,
        parser=parse_host_preference,
        default=HostPreference("*4"),
    ),
    ConfigField(
        attr="port",
        name="PORT",
        kind=FieldKind.OPTIONAL_WITH_DEFAULT,
        parser=parse_int,
        default=3000,
    ),
    ConfigField(
        attr="ip_from_header",
        name="IP_FROM_HEADER",
        kind=FieldKind.OPTIONAL_WITH_DEFAULT,
        parser=parse_bool,
        default=False,
    ),
    ConfigField(
        attr="analytics",
        name="GOOGLE_ANALYTICS_CODE",
        kind=FieldKind.OPTIONAL_NO_DEFAULT,
        parser=parse_string,
    ),
    ConfigField(
        attr="data_dir",
        name="DATA_DIR",
        kind=FieldKind.OPTIONAL_WITH_DEFAULT,
        parser=parse_string,
        default="./data",
    ),
    ConfigField(
        attr="github_auth_token",
        name="GITHUB_AUTH_TOKEN",
        kind=FieldKind.OPTIONAL_NO_DEFAULT,
        parser=parse_secret,
        absent_advisory=GITHUB_TOKEN_ADVISORY,
    ),
    ConfigField(
        attr="github_client_id",
        name="GITHUB_CLIENT_ID",
        kind=FieldKind.REQUIRED,
        parser=parse_string,
    ),
    ConfigField(
        attr="github_client_secret",
        name="GITHUB_CLIENT_SECRET",
        kind=FieldKind.REQUIRED,
        parser=parse_secret,
    ),
    ConfigField(
        attr="max_hoogle_parse_errors",
        name="MAX_HOOGLE_PARSE_ERRORS",
        kind=FieldKind.OPTIONAL_WITH_DEFAULT,
        parser=parse_int,
        default=250,
    ),
    ConfigField(
        attr="hoogle_database_max_age",
        name="HOOGLE_DATABASE_MAX_AGE_SECONDS",
        kind=FieldKind.OPTIONAL_WITH_DEFAULT,
        parser=parse_seconds,
        default=timedelta(hours=1),
    ),
    ConfigField(
        attr="minimum_compiler_version",
        name="MINIMUM_COMPILER_VERSION",
        kind=FieldKind.OPTIONAL_WITH_DEFAULT,
        parser=parse_version,
        default=ZERO_VERSION,
    ),
)


def field_by_attr(attr: str) -> ConfigField:
    for field in CONFIG_SCHEMA:
        if field.attr == attr:
            return field
    raise KeyError(attr)
