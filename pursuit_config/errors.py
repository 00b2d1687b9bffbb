"""Configuration errors.

Exception hierarchy for fatal settings failures. An absent optional variable
is not an error and never raises.
"""


class ConfigError(Exception):
    """Base exception for settings assembly."""

    def __init__(self, message: str, variable: str):
        super().__init__(message)
        self.message = message
        self.variable = variable


class MissingRequiredError(ConfigError):
    """Required environment variable is not set."""

    def __init__(self, variable: str):
        super().__init__(
            f'Required environment variable "{variable}" is not set', variable
        )


class ParseFailureError(ConfigError):
    """Environment variable is set but its text could not be parsed."""

    def __init__(self, variable: str, raw: str):
        super().__init__(
            f'Failed to parse environment variable "{variable}": "{raw}"', variable
        )
        self.raw = raw
