"""Turn a readme into text ready for ``#![doc = ...]`` embedding."""

from pathlib import Path
from typing import Iterable

from .args import DocifyArgs
from .augment import RUST_LANGUAGES, augment_code_blocks
from .links import SubstitutionRequest, rewrite_links
from .loader import load_readme, resolve_readme_path


def transform_readme(
    readme: str, request: SubstitutionRequest, languages: Iterable[str] = RUST_LANGUAGES
) -> str:
    """Augment Rust code blocks, then replace the docs URL."""
    augmented = augment_code_blocks(readme, languages)
    return rewrite_links(augmented, request)


def docify(*args, project_root: str | Path | None = None, languages: Iterable[str] = RUST_LANGUAGES) -> str:
    """Load a readme and adapt it for rustdoc.

    Takes the readme path (relative to the project root), the docs URL to
    replace and its replacement. Every Rust code block gets a trailing
    ``# Ok::<(), Box<dyn std::error::Error>>(())`` line so examples using
    ``?`` run as doctests, and every occurrence of the docs URL is replaced.

    Example:
        docify("README.md", "https://docs.rs/some_crate/latest/some_crate/", "./")

    Raises:
        ArgumentShapeError: Arguments are not three strings
        ReadmeNotFoundError: No file at the resolved path
        ReadmeReadError: The file could not be read
    """
    parsed = DocifyArgs.from_args(args)
    readme_path = resolve_readme_path(parsed.readme_path, project_root)
    readme = load_readme(readme_path, argument="readme_path")
    return transform_readme(readme, SubstitutionRequest(parsed.docs_url, parsed.replacement_url), languages)
