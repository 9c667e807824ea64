"""Errors raised while turning a readme into rustdoc-ready text."""

from pathlib import Path


class DocifyError(Exception):
    """Base error for readme loading and argument problems.

    Attributes:
        argument: Name of the input that caused the failure, if any
    """

    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


class ArgumentShapeError(DocifyError):
    """Wrong number or type of docify arguments."""


class ReadmeNotFoundError(DocifyError):
    """The resolved readme path is not a file."""

    def __init__(self, message: str, path: Path, argument: str | None = None) -> None:
        super().__init__(message, argument)
        self.path = path


class ReadmeReadError(DocifyError):
    """The readme exists but could not be read."""

    def __init__(self, message: str, path: Path, argument: str | None = None) -> None:
        super().__init__(message, argument)
        self.path = path


class ConfigError(DocifyError):
    """Configuration file is missing or malformed."""
