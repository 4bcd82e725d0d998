"""Validation outcomes and their per-file and per-run aggregates."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from doclinks.models.link import LinkKind, LinkRecord


class LinkStatus(str, Enum):
    """Human-readable status tag attached to every checked link."""

    FOUND = "found"
    NOT_FOUND = "not-found"
    EXTERNAL_OK = "external-ok"
    EXTERNAL_ERROR = "external-error"
    SKIPPED_ANCHOR = "skipped-anchor"
    SKIPPED_OTHER = "skipped-other"


SKIPPED_STATUSES = frozenset({LinkStatus.SKIPPED_ANCHOR, LinkStatus.SKIPPED_OTHER})
VALID_STATUSES = frozenset({LinkStatus.FOUND, LinkStatus.EXTERNAL_OK}) | SKIPPED_STATUSES


@dataclass(frozen=True)
class LinkOutcome:
    """Result of checking one link."""

    link: LinkRecord
    kind: LinkKind
    status: LinkStatus
    detail: Optional[str] = None
    candidates: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return self.status in VALID_STATUSES

    @property
    def skipped(self) -> bool:
        return self.status in SKIPPED_STATUSES


@dataclass(frozen=True)
class FileReport:
    """All link outcomes of one document.

    A file is valid iff every checked (non-skipped) link is valid and the
    document could be read.
    """

    path: str
    outcomes: tuple[LinkOutcome, ...] = ()
    error: Optional[str] = None

    @property
    def valid(self) -> bool:
        if self.error is not None:
            return False
        return all(outcome.valid for outcome in self.outcomes)

    @property
    def invalid_outcomes(self) -> list[LinkOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.valid]


@dataclass(frozen=True)
class RunReport:
    """Aggregate over every processed document.

    Reports are combined with `merge`, so a directory walk folds the reports
    returned by each recursive call instead of sharing a mutable flag.
    """

    files: tuple[FileReport, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, file_report: FileReport) -> "RunReport":
        return cls(files=(file_report,))

    def merge(self, other: "RunReport") -> "RunReport":
        return RunReport(files=self.files + other.files)

    @property
    def valid(self) -> bool:
        return all(report.valid for report in self.files)

    @property
    def exit_code(self) -> int:
        return 0 if self.valid else 1

    @property
    def link_count(self) -> int:
        return sum(len(report.outcomes) for report in self.files)

    @property
    def skipped_count(self) -> int:
        return sum(
            1 for report in self.files for outcome in report.outcomes if outcome.skipped
        )

    @property
    def checked_count(self) -> int:
        return self.link_count - self.skipped_count

    @property
    def invalid_count(self) -> int:
        return sum(len(report.invalid_outcomes) for report in self.files)
