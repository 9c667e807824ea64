"""Literal docs URL replacement."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SubstitutionRequest:
    """Replace every occurrence of ``target`` with ``replacement``.

    Both are plain strings; there is no pattern syntax or escaping.
    """

    target: str
    replacement: str


def count_links(text: str, request: SubstitutionRequest) -> int:
    """Count the occurrences ``rewrite_links`` would replace."""
    if not request.target:
        return 0
    return text.count(request.target)


def rewrite_links(text: str, request: SubstitutionRequest) -> str:
    """Replace the target URL with the replacement, left to right, in one pass.

    Replaced text is never scanned again, so a replacement that contains the
    target does not grow on repeated matches. An empty target leaves the text
    unchanged.
    """
    if not request.target:
        return text
    return text.replace(request.target, request.replacement)
