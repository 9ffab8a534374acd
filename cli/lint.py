"""Code quality commands."""

import subprocess
import sys

SOURCE_DIRS = ("learning_patterns/", "tests/", "cli/")


def main() -> None:
    """Run ruff linter."""
    sys.exit(subprocess.run([sys.executable, "-m", "ruff", "check", *SOURCE_DIRS], check=False).returncode)


def format_code() -> None:
    sys.exit(subprocess.run([sys.executable, "-m", "ruff", "format", *SOURCE_DIRS], check=False).returncode)
