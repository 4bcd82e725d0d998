"""Link record extracted from a markdown document."""

from dataclasses import dataclass
from enum import Enum


class LinkKind(str, Enum):
    """How a link target is treated by the checker."""

    ANCHOR = "anchor"
    INTERNAL = "internal"
    EXTERNAL = "external"
    OTHER = "other"


@dataclass(frozen=True)
class LinkRecord:
    """An inline markdown link: display text, raw target and matched syntax."""

    text: str
    url: str
    full: str

    def __repr__(self) -> str:
        return f"<LinkRecord(text={self.text!r}, url={self.url!r})>"
