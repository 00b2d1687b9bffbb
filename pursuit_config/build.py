"""Build mode.

The build mode is fixed when the application is packaged, not read from the
environment. Development builds turn on every developer convenience flag.
"""

from enum import Enum


class BuildMode(str, Enum):
    """Which kind of build is running."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"

    @property
    def is_development(self) -> bool:
        return self is BuildMode.DEVELOPMENT


BUILD_MODE = BuildMode.PRODUCTION
