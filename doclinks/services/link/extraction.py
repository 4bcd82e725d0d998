"""Inline markdown link extraction."""

import re
from typing import Iterator

from doclinks.models.link import LinkRecord

# [label](target): the label may wrap across lines, the target may not
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)\n]+)\)")


def iter_links(content: str) -> Iterator[LinkRecord]:
    """
    Yield the inline links of a document in order of appearance.

    Args:
        content: Raw document text

    Yields:
        One LinkRecord per non-overlapping `[text](target)` match
    """
    for match in LINK_PATTERN.finditer(content):
        yield LinkRecord(text=match.group(1), url=match.group(2), full=match.group(0))


def extract_links(content: str) -> list[LinkRecord]:
    """Return every inline link of a document; empty when there are none."""
    return list(iter_links(content))
