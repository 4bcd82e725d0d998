"""Data models for Doc-Links."""

from doclinks.models.link import LinkKind, LinkRecord
from doclinks.models.result import FileReport, LinkOutcome, LinkStatus, RunReport

__all__ = ["LinkKind", "LinkRecord", "LinkStatus", "LinkOutcome", "FileReport", "RunReport"]
