"""
Pursuit Configuration Package.

Builds the immutable application settings record from ``PURSUIT_``
environment variables.
"""

from pursuit_config.assembler import (
    Failure,
    SettingsAssembler,
    Success,
    assemble,
    load_settings,
)
from pursuit_config.build import BUILD_MODE, BuildMode
from pursuit_config.errors import ConfigError, MissingRequiredError, ParseFailureError
from pursuit_config.settings import AppSettings, LoggingSettings

__all__ = [
    "AppSettings",
    "BUILD_MODE",
    "BuildMode",
    "ConfigError",
    "Failure",
    "LoggingSettings",
    "MissingRequiredError",
    "ParseFailureError",
    "SettingsAssembler",
    "Success",
    "assemble",
    "load_settings",
]
