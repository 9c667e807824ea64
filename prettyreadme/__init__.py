"""Adapt README files for embedding in rustdoc.

Makes Rust examples that use the ``?`` operator run as doctests and rewrites
absolute docs links, so one README works on both GitHub and docs.rs.
"""

from .augment import MARKER_LINE, RUST_LANGUAGES, FencedBlock, augment_code_blocks, find_fenced_blocks
from .errors import ArgumentShapeError, ConfigError, DocifyError, ReadmeNotFoundError, ReadmeReadError
from .links import SubstitutionRequest, rewrite_links
from .readme import docify, transform_readme

__all__ = [
    "MARKER_LINE",
    "RUST_LANGUAGES",
    "ArgumentShapeError",
    "ConfigError",
    "DocifyError",
    "FencedBlock",
    "ReadmeNotFoundError",
    "ReadmeReadError",
    "SubstitutionRequest",
    "augment_code_blocks",
    "docify",
    "find_fenced_blocks",
    "rewrite_links",
    "transform_readme",
]
