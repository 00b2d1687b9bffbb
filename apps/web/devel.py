"""
Pursuit Development Entry Point.

Same startup as ``apps.web.main`` with the development build mode, which
turns on detailed request logging, verbose logging, template reloading,
mutable static files and skips asset combining.
"""

from apps.web.main import run
from pursuit_config import BuildMode


def main() -> None:
    run(BuildMode.DEVELOPMENT)


if __name__ == "__main__":
    main()
