"""Link checking components: extraction, classification, probing and reporting."""

# Re-export submodules for direct access if needed
from doclinks.services.link.classification import (
    PrefixResolver,
    ProbingResolver,
    Resolution,
    build_resolver,
    classify_link,
)
from doclinks.services.link.extraction import extract_links, iter_links
from doclinks.services.link.probe import UrlProbe
from doclinks.services.link.reporting import ConsoleReporter

__all__ = [
    "classify_link",
    "build_resolver",
    "PrefixResolver",
    "ProbingResolver",
    "Resolution",
    "extract_links",
    "iter_links",
    "UrlProbe",
    "ConsoleReporter",
]
