"""Link check service: directory walk, per-link dispatch and aggregation."""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable, Optional

from doclinks.config import Settings, get_settings
from doclinks.exceptions import NotFoundError, ValidationError
from doclinks.models.link import LinkKind, LinkRecord
from doclinks.models.result import FileReport, LinkOutcome, LinkStatus, RunReport
from doclinks.services.link.classification import (
    PrefixResolver,
    ProbingResolver,
    build_resolver,
    classify_link,
)
from doclinks.services.link.extraction import extract_links
from doclinks.services.link.probe import UrlProbe

logger = logging.getLogger(__name__)

FileCallback = Callable[[FileReport], None]


class LinkCheckService:
    """Service layer that checks every link of a documentation content tree."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        probe: Optional[UrlProbe] = None,
        resolver: Optional[PrefixResolver | ProbingResolver] = None,
        on_file: Optional[FileCallback] = None,
    ):
        """
        Initialize link check service.

        Args:
            settings: Settings to use; the cached application settings by default
            probe: External URL probe; built from `request_timeout` when omitted
            resolver: Internal link resolver; built from `resolution_policy`
                when omitted
            on_file: Called with each FileReport as soon as a document
                found by a directory walk has been checked
        """
        self.settings = settings or get_settings()
        self.probe = probe or UrlProbe(timeout=self.settings.request_timeout)
        self.resolver = resolver or build_resolver(self.settings)
        self.on_file = on_file

    def check_tree(self) -> RunReport:
        """
        Check every document under the configured content root.

        Returns:
            Aggregated run report

        Raises:
            NotFoundError: If the content root does not exist
            ValidationError: If the content root is not a directory
        """
        return self.check_directory(self.settings.get_content_root())

    def check_directory(self, directory: str | Path) -> RunReport:
        """
        Recursively check every document below a directory.

        Entries are visited in sorted order. Each subdirectory contributes the
        RunReport of its own walk, merged into this one.

        Args:
            directory: Directory to walk

        Returns:
            Aggregated run report for the directory

        Raises:
            NotFoundError: If the directory does not exist
            ValidationError: If the path is not a directory
        """
        directory = Path(directory)
        if not directory.exists():
            raise NotFoundError("Content root", str(directory))
        if not directory.is_dir():
            raise ValidationError(f"'{directory}' is not a directory", "content_root")
        return self._walk(directory)

    def _walk(self, directory: Path) -> RunReport:
        run = RunReport()
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if entry.is_dir():
                run = run.merge(self._walk(entry))
            elif self.is_document(entry):
                report = self.check_file(entry)
                if self.on_file is not None:
                    self.on_file(report)
                run = run.merge(RunReport.of(report))
        return run

    def is_document(self, path: Path) -> bool:
        """Check if a file name ends in one of the configured document extensions."""
        return path.name.endswith(tuple(self.settings.document_extensions))

    def check_file(self, path: str | Path) -> FileReport:
        """
        Check every link of one document.

        A document that cannot be read is reported as a failed file rather
        than aborting the run.

        Args:
            path: Document path

        Returns:
            FileReport for the document

        Raises:
            NotFoundError: If the document does not exist
        """
        path = Path(path)
        if not path.exists():
            raise NotFoundError("Document", str(path))
        display = os.path.relpath(path)
        logger.debug("Checking %s", display)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", display, e)
            return FileReport(path=display, error=str(e))
        return self.check_text(content, source=display)

    def check_text(self, content: str, source: str = "<text>") -> FileReport:
        """Check the links of an in-memory document."""
        return FileReport(path=source, outcomes=self.check_links(extract_links(content)))

    def check_links(self, links: Iterable[LinkRecord]) -> tuple[LinkOutcome, ...]:
        """
        Check links, returning outcomes in link order.

        With `max_workers` above one the checks run on a bounded thread pool;
        results are still collected in the order of `links`.
        """
        links = list(links)
        workers = self.settings.max_workers
        if workers <= 1 or len(links) <= 1:
            return tuple(self.check_link(link) for link in links)
        with ThreadPoolExecutor(max_workers=min(workers, len(links))) as executor:
            return tuple(executor.map(self.check_link, links))

    def check_link(self, link: LinkRecord) -> LinkOutcome:
        """
        Dispatch one link to the check matching its classification.

        Args:
            link: Link to check

        Returns:
            Outcome: anchors and unclassified targets are skipped, internal
            targets are resolved on disk, external targets are probed
        """
        kind = classify_link(link.url)
        if kind is LinkKind.ANCHOR:
            return LinkOutcome(link=link, kind=kind, status=LinkStatus.SKIPPED_ANCHOR)
        if kind is LinkKind.EXTERNAL:
            return self.probe.check(link)
        if kind is LinkKind.INTERNAL:
            resolution = self.resolver.resolve(link.url)
            if resolution is not None:
                status = LinkStatus.FOUND if resolution.exists else LinkStatus.NOT_FOUND
                detail = None if resolution.exists else "File not found"
                return LinkOutcome(
                    link=link,
                    kind=kind,
                    status=status,
                    detail=detail,
                    candidates=resolution.candidates,
                )
        return LinkOutcome(link=link, kind=LinkKind.OTHER, status=LinkStatus.SKIPPED_OTHER)
