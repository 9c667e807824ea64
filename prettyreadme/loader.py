"""Readme path resolution and loading."""

import os
from pathlib import Path

from .errors import ReadmeNotFoundError, ReadmeReadError

PROJECT_ROOT_ENV = "PRETTY_README_ROOT"


def resolve_project_root(project_root: str | Path | None = None) -> Path:
    """Pick the directory readme paths are relative to.

    An explicit root wins, then the PRETTY_README_ROOT environment variable,
    then the current directory.
    """
    if project_root is not None:
        return Path(project_root)
    return Path(os.getenv(PROJECT_ROOT_ENV, "."))


def resolve_readme_path(path: str | Path, project_root: str | Path | None = None) -> Path:
    """Join the readme path onto the project root."""
    return resolve_project_root(project_root) / path


def load_readme(path: Path, argument: str | None = None) -> str:
    """Read the readme as UTF-8 with line endings left as they are on disk.

    Args:
        path: Resolved readme path
        argument: Name of the input the path came from, attached to errors

    Raises:
        ReadmeNotFoundError: The path is not a file
        ReadmeReadError: The file could not be read or decoded
    """
    if not path.is_file():
        raise ReadmeNotFoundError(
            f"Readme file at {path} not found; path must be relative to the project root",
            path=path,
            argument=argument,
        )

    try:
        with path.open(encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadmeReadError(f"Error reading readme file at {path}: {e}", path=path, argument=argument) from e
