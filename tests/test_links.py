"""Tests for docs URL replacement."""

import pytest

from prettyreadme.links import SubstitutionRequest, count_links, rewrite_links

DOCS_URL = "https://docs.rs/crate/latest/crate/"


def test_rewrite_all_occurrences():
    """Test every occurrence of the docs URL is replaced."""
    text = f"[A]: {DOCS_URL}struct.A.html\n[B]: {DOCS_URL}fn.b.html\n"

    result = rewrite_links(text, SubstitutionRequest(DOCS_URL, "./"))

    assert result == "[A]: ./struct.A.html\n[B]: ./fn.b.html\n"


@pytest.mark.parametrize(("text", "target", "replacement", "expected"), [
    # Case-sensitive
    ("HTTPS://DOCS.RS/x", "https://docs.rs/", "./", "HTTPS://DOCS.RS/x"),
    # No regex semantics
    ("a.b a+b", "a.b", "X", "X a+b"),
    ("[x](y)", "(y)", "(z)", "[x](z)"),
    # Non-overlapping, left to right
    ("aaa", "aa", "b", "ba"),
    # No match
    ("nothing here", DOCS_URL, "./", "nothing here"),
    # Replacement may be empty
    (f"see {DOCS_URL}index.html", DOCS_URL, "", "see index.html"),
])
def test_literal_replacement(text, target, replacement, expected):
    """Test literal, case-sensitive, left-to-right replacement."""
    assert rewrite_links(text, SubstitutionRequest(target, replacement)) == expected


def test_replacement_containing_target_is_single_pass():
    """Test replaced text is not scanned again."""
    request = SubstitutionRequest("docs", "docs/docs")

    assert rewrite_links("docs and docs", request) == "docs/docs and docs/docs"


def test_idempotent_when_disjoint():
    """Test rewriting twice equals rewriting once when replacement lacks target."""
    text = f"{DOCS_URL}a {DOCS_URL}b"
    request = SubstitutionRequest(DOCS_URL, "./")

    once = rewrite_links(text, request)

    assert rewrite_links(once, request) == once


def test_empty_target_is_noop():
    """Test an empty target leaves the text unchanged."""
    request = SubstitutionRequest("", "x")

    assert rewrite_links("abc", request) == "abc"
    assert count_links("abc", request) == 0


def test_count_links():
    """Test counting matches the number of replacements."""
    text = f"{DOCS_URL} {DOCS_URL} {DOCS_URL}"

    assert count_links(text, SubstitutionRequest(DOCS_URL, "./")) == 3
