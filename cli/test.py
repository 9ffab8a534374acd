"""Test runner commands."""

import subprocess
import sys


def _pytest(*args: str) -> int:
    return subprocess.run([sys.executable, "-m", "pytest", *args, "--tb=short"], check=False).returncode


def main() -> None:
    """Run unit tests."""
    sys.exit(_pytest("tests/unit", "-v"))


def test_smoke() -> None:
    """Run API smoke tests against an in-process app."""
    sys.exit(_pytest("tests/smoke", "-v"))


def test_all() -> None:
    sys.exit(_pytest("tests/", "-v"))
