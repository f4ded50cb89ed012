"""Library exception type and assertion helpers."""

from __future__ import annotations

__all__ = ["MylibError", "build_str", "assert_that"]


class MylibError(Exception):
    """Raised when a library check fails."""


def build_str(*args: object) -> str:
    """Concatenate the string forms of all arguments."""
    return "".join(str(arg) for arg in args)


def assert_that(condition: object, *args: object) -> None:
    """Raise MylibError with a message built from ``args`` unless ``condition`` holds."""
    if not condition:
        raise MylibError(build_str("assert failed", "\n", *args))