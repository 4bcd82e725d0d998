"""Console report rendering."""

import sys
from typing import Optional, TextIO

from doclinks.models.link import LinkKind
from doclinks.models.result import FileReport, LinkOutcome, LinkStatus, RunReport

OK_MARK = "✅"
FAIL_MARK = "❌"
ANCHOR_MARK = "➡️ "
WARN_MARK = "⚠️ "


def format_outcome(outcome: LinkOutcome) -> str:
    """Render the indicator line for one link."""
    url = outcome.link.url
    if outcome.status is LinkStatus.SKIPPED_ANCHOR:
        return f"  {ANCHOR_MARK} {url} (same-file anchor)"
    if outcome.status is LinkStatus.SKIPPED_OTHER:
        return f"  {WARN_MARK} {url} → Skipped (not a local or HTTP link)"
    if outcome.valid:
        return f"  {OK_MARK} {url}"
    if outcome.kind is LinkKind.INTERNAL:
        reason = "File not found"
        if len(outcome.candidates) > 1:
            reason = f"{reason} (tried: {', '.join(outcome.candidates)})"
        return f"  {FAIL_MARK} {url} → {reason}"
    return f"  {FAIL_MARK} {url} → {outcome.detail}"


def format_file_report(report: FileReport) -> list[str]:
    """Render the header, count and link lines of one document."""
    lines = [f"FILE: {report.path}"]
    if report.error is not None:
        lines.append(f"  {FAIL_MARK} Could not read file → {report.error}")
        lines.append("")
        return lines
    if not report.outcomes:
        lines.append("  No hyperlinks found!")
        lines.append("")
        return lines
    lines.append(f"  {len(report.outcomes)} links found:")
    lines.extend(format_outcome(outcome) for outcome in report.outcomes)
    lines.append("")
    return lines


def format_summary(run: RunReport) -> str:
    if run.valid:
        return f"{OK_MARK} All links are valid!"
    return f"{FAIL_MARK} Some links are invalid!"


class ConsoleReporter:
    """Streams a link check report to a text stream, one file at a time."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, line: str = "") -> None:
        self.stream.write(line + "\n")

    def start(self) -> None:
        self._write("📝 Checking markdown links...")
        self._write()

    def file_checked(self, report: FileReport) -> None:
        self._write()
        for line in format_file_report(report):
            self._write(line)

    def finish(self, run: RunReport) -> None:
        self._write(format_summary(run))
        self.stream.flush()
