"""Link classification and local-file resolution."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from doclinks.exceptions import ValidationError
from doclinks.models.link import LinkKind

logger = logging.getLogger(__name__)


def classify_link(url: str) -> LinkKind:
    """
    Classify a link target. The first matching rule wins.

    Args:
        url: Raw link target

    Returns:
        ANCHOR for '#...', INTERNAL for a single leading '/', EXTERNAL for
        'http...', OTHER for anything else
    """
    if url.startswith("#"):
        return LinkKind.ANCHOR
    if url.startswith("/") and not url.startswith("//") and not url.startswith("http"):
        return LinkKind.INTERNAL
    if url.startswith("http"):
        return LinkKind.EXTERNAL
    return LinkKind.OTHER


def strip_fragment(url: str) -> str:
    """Drop a trailing '#fragment' from a link target."""
    return url.split("#", 1)[0]


@dataclass(frozen=True)
class Resolution:
    """Filesystem lookup for one internal link."""

    exists: bool
    candidates: tuple[str, ...]


class PrefixResolver:
    """Resolves targets under a fixed prefix as exact paths.

    Only targets beginning with `prefix` are internal; everything else is not
    subject to this check. The fragment-free target, without its leading '/',
    is looked up under `base_dir`.
    """

    def __init__(self, base_dir: Path, prefix: str = "/docs/"):
        if not prefix.startswith("/"):
            raise ValidationError("Internal prefix must start with '/'", "internal_prefix")
        self.base_dir = Path(base_dir)
        self.prefix = prefix

    def candidates(self, url: str) -> list[Path]:
        relative = strip_fragment(url).lstrip("/")
        return [self.base_dir / relative]

    def resolve(self, url: str) -> Optional[Resolution]:
        if not url.startswith(self.prefix):
            return None
        return _probe(url, self.candidates(url))


class ProbingResolver:
    """Resolves root-relative targets by probing document candidates.

    The fragment-free target is joined under the content root and tried as
    `<p>.mdx`, `<p>.md`, `<p>/index.mdx` and `<p>/index.md`, in that order.
    """

    SUFFIXES = (".mdx", ".md")
    INDEX_NAMES = ("index.mdx", "index.md")

    def __init__(self, content_root: Path):
        self.content_root = Path(content_root)

    def candidates(self, url: str) -> list[Path]:
        relative = strip_fragment(url).lstrip("/")
        target = self.content_root / relative
        paths = [Path(f"{target}{suffix}") for suffix in self.SUFFIXES]
        paths.extend(target / name for name in self.INDEX_NAMES)
        return paths

    def resolve(self, url: str) -> Optional[Resolution]:
        if classify_link(url) is not LinkKind.INTERNAL:
            return None
        return _probe(url, self.candidates(url))


def _probe(url: str, paths: list[Path]) -> Resolution:
    tried = tuple(str(path) for path in paths)
    for path in paths:
        if path.exists():
            return Resolution(exists=True, candidates=tried)
    logger.warning("Internal link %s not found, tried: %s", url, ", ".join(tried))
    return Resolution(exists=False, candidates=tried)


def build_resolver(settings) -> PrefixResolver | ProbingResolver:
    """Create the resolver selected by `settings.resolution_policy`."""
    if settings.is_probe_policy():
        return ProbingResolver(settings.get_content_root())
    return PrefixResolver(settings.get_base_dir(), settings.internal_prefix)
