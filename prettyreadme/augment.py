"""Rust code block augmentation.

Appends ``# Ok::<(), Box<dyn std::error::Error>>(())`` to the end of every
Rust code block so examples using the ``?`` operator run as doctests without
an explicit ``main`` or ``Result`` return type.

Works in two phases:
1. ``find_fenced_blocks`` scans the text line by line and records each Rust
   block with the line ending used before its closing fence
2. ``insert_markers`` rebuilds the text, splicing the marker line in front of
   each recorded closing fence
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator

FENCE = "```"
MARKER_LINE = "# Ok::<(), Box<dyn std::error::Error>>(())"
RUST_LANGUAGES = frozenset({"rust", "rs"})

# \r\n must come first so it is consumed as a single break
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class FencedBlock:
    """A Rust code block located in a document."""

    start: int  # offset of the opening fence
    end: int  # offset just past the closing fence
    language: str
    body: str
    line_ending: str
    line_number: int

    @property
    def closing_fence(self) -> int:
        """Offset of the closing fence, where the marker line goes."""
        return self.end - len(FENCE)

    @property
    def body_lines(self) -> int:
        return len(_LINE_BREAK.split(self.body))


@dataclass(frozen=True)
class _Line:
    start: int
    content: str
    line_ending: str


def _iter_lines(text: str) -> Iterator[_Line]:
    """Split text into lines, keeping the exact break that ends each one."""
    pos = 0
    for match in _LINE_BREAK.finditer(text):
        yield _Line(pos, text[pos : match.start()], match.group())
        pos = match.end()
    if pos < len(text):
        yield _Line(pos, text[pos:], "")


def _opening_language(line: _Line, languages: Iterable[str]) -> str | None:
    """Return the fence tag if the line opens a block in one of the languages."""
    if not line.line_ending or not line.content.startswith(FENCE):
        return None

    tag = line.content[len(FENCE) :]
    if tag.lower() in languages:
        return tag
    return None


def find_fenced_blocks(text: str, languages: Iterable[str] = RUST_LANGUAGES) -> list[FencedBlock]:
    """Locate every non-empty fenced block tagged with one of the languages.

    Args:
        text: Markdown document
        languages: Accepted fence tags, compared case-insensitively

    Returns:
        Blocks in document order, never overlapping
    """
    languages = {language.lower() for language in languages}
    lines = list(_iter_lines(text))
    blocks = []

    i = 0
    while i < len(lines):
        opening = lines[i]
        language = _opening_language(opening, languages)
        if language is None:
            i += 1
            continue

        # Body ends at the first closing fence, however far away
        close = next((j for j in range(i + 1, len(lines)) if lines[j].content == FENCE), None)
        if close is None:
            break

        closing = lines[close]
        if close > i + 1:
            last = lines[close - 1]
            body = text[lines[i + 1].start : last.start + len(last.content)]
            if body:
                blocks.append(
                    FencedBlock(
                        start=opening.start,
                        end=closing.start + len(FENCE),
                        language=language,
                        body=body,
                        line_ending=last.line_ending,
                        line_number=i + 1,
                    )
                )
        i = close + 1

    return blocks


def insert_markers(text: str, blocks: Iterable[FencedBlock], marker: str = MARKER_LINE) -> str:
    """Insert the marker line before the closing fence of each block.

    The marker is terminated with the block's own line ending, so documents
    with CRLF or CR endings keep them.
    """
    parts = []
    pos = 0
    for block in blocks:
        parts.append(text[pos : block.closing_fence])
        parts.append(marker + block.line_ending)
        pos = block.closing_fence
    parts.append(text[pos:])
    return "".join(parts)


def augment_code_blocks(
    text: str, languages: Iterable[str] = RUST_LANGUAGES, marker: str = MARKER_LINE
) -> str:
    """Add the marker line to the end of every Rust code block.

    Not idempotent: running it twice inserts the marker twice.
    """
    return insert_markers(text, find_fenced_blocks(text, languages), marker)
