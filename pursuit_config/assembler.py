"""
Settings Assembler.

Walks the configuration schema, resolves every field through the
``EnvironmentReader``, applies defaults, and builds one ``AppSettings``.

Assembly is all-or-nothing: the first missing required variable or parse
failure ends it and no partial record is produced. ``assemble()`` returns a
``Success`` or ``Failure`` instead of exiting so the entry point decides what
to do with the error.
"""

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from pursuit_config.build import BUILD_MODE, BuildMode
from pursuit_config.errors import ConfigError
from pursuit_config.reader import DEFAULT_PREFIX, EnvironmentReader, ParseFailure, Present
from pursuit_config.schema import CONFIG_SCHEMA, ConfigField, FieldKind
from pursuit_config.settings import AppSettings
from pursuit_obs.logging import get_logger

logger = get_logger(__name__)

# Fixed by the build mode, never read from the environment.
DERIVED_FLAGS = (
    "detailed_request_logging",
    "should_log_all",
    "reload_templates",
    "mutable_static",
    "skip_combining",
)


@dataclass(frozen=True)
class Success:
    settings: AppSettings


@dataclass(frozen=True)
class Failure:
    error: ConfigError


AssemblyResult = Union[Success, Failure]


class SettingsAssembler:
    """Builds ``AppSettings`` from an injected environment mapping."""

    def __init__(
        self,
        environ: Mapping[str, str],
        schema: tuple[ConfigField, ...] = CONFIG_SCHEMA,
        build_mode: BuildMode = BUILD_MODE,
        prefix: str = DEFAULT_PREFIX,
    ):
        self.reader = EnvironmentReader(environ, prefix=prefix)
        self.schema = schema
        self.build_mode = build_mode
        self._advised: set[str] = set()

    def resolve_optional_with_default(self, field: ConfigField, default: Any) -> Any:
        result = self.reader.lookup_optional(field.name, field.parser)
        if isinstance(result, ParseFailure):
            raise result.to_error()
        if isinstance(result, Present):
            return result.value
        return default

    def resolve_required(self, field: ConfigField) -> Any:
        return self.reader.lookup_required(field.name, field.parser)

    def resolve_optional_no_default(self, field: ConfigField) -> Optional[Any]:
        value = self.resolve_optional_with_default(field, None)
        if value is None and field.absent_advisory:
            self._advise(field)
        return value

    def resolve(self, field: ConfigField) -> Any:
        """Resolve one field according to its kind."""
        if field.kind is FieldKind.REQUIRED:
            return self.resolve_required(field)
        if field.kind is FieldKind.OPTIONAL_WITH_DEFAULT:
            return self.resolve_optional_with_default(field, field.default)
        return self.resolve_optional_no_default(field)

    def derived_flags(self) -> dict[str, bool]:
        """Developer convenience flags, all on in development, all off otherwise."""
        enabled = self.build_mode.is_development
        return {name: enabled for name in DERIVED_FLAGS}

    def assemble(self) -> AssemblyResult:
        """Resolve every schema field, stopping at the first fatal error."""
        self._advised.clear()
        values: dict[str, Any] = {}

        try:
            for field in self.schema:
                values[field.attr] = self.resolve(field)
        except ConfigError as e:
            logger.debug("config.assembly_failed", variable=e.variable)
            return Failure(e)

        values.update(self.derived_flags())
        logger.debug(
            "config.assembled", build_mode=self.build_mode.value, fields=len(values)
        )
        return Success(AppSettings(**values))

    def _advise(self, field: ConfigField) -> None:
        if field.attr in self._advised:
            return
        self._advised.add(field.attr)
        logger.warning(
            "config.credential_absent",
            variable=self.reader.qualify(field.name),
            message=field.absent_advisory,
        )


def assemble(
    environ: Optional[Mapping[str, str]] = None,
    build_mode: BuildMode = BUILD_MODE,
) -> AssemblyResult:
    """Assemble settings from ``environ`` (the process environment by default)."""
    if environ is None:
        environ = os.environ
    return SettingsAssembler(environ, build_mode=build_mode).assemble()


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    build_mode: BuildMode = BUILD_MODE,
) -> AppSettings:
    """Like ``assemble`` but raises the ``ConfigError`` on failure."""
    result = assemble(environ, build_mode)
    if isinstance(result, Failure):
        raise result.error
    return result.settings
