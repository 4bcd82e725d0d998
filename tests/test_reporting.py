"""Tests for console report rendering."""

import io

import pytest

pytestmark = pytest.mark.unit

from doclinks.models.link import LinkKind, LinkRecord
from doclinks.models.result import FileReport, LinkOutcome, LinkStatus, RunReport
from doclinks.services.link.reporting import (
    ConsoleReporter,
    format_file_report,
    format_outcome,
    format_summary,
)


def _outcome(url, kind, status, detail=None, candidates=()):
    link = LinkRecord(text="x", url=url, full=f"[x]({url})")
    return LinkOutcome(link=link, kind=kind, status=status, detail=detail, candidates=candidates)


class TestFormatOutcome:
    """Tests for per-link indicator lines."""

    def test_found(self):
        line = format_outcome(_outcome("/docs/a.md", LinkKind.INTERNAL, LinkStatus.FOUND))
        assert line == "  ✅ /docs/a.md"

    def test_not_found_single_candidate(self):
        outcome = _outcome(
            "/docs/b.md", LinkKind.INTERNAL, LinkStatus.NOT_FOUND, "File not found", ("docs/b.md",)
        )
        assert format_outcome(outcome) == "  ❌ /docs/b.md → File not found"

    def test_not_found_lists_probed_candidates(self):
        outcome = _outcome(
            "/b",
            LinkKind.INTERNAL,
            LinkStatus.NOT_FOUND,
            "File not found",
            ("docs/b.mdx", "docs/b.md", "docs/b/index.mdx", "docs/b/index.md"),
        )
        assert format_outcome(outcome) == (
            "  ❌ /b → File not found "
            "(tried: docs/b.mdx, docs/b.md, docs/b/index.mdx, docs/b/index.md)"
        )

    def test_external_ok(self):
        line = format_outcome(
            _outcome("https://example.com", LinkKind.EXTERNAL, LinkStatus.EXTERNAL_OK)
        )
        assert line == "  ✅ https://example.com"

    def test_external_status(self):
        outcome = _outcome(
            "https://example.com/x", LinkKind.EXTERNAL, LinkStatus.EXTERNAL_ERROR, "Status: 404"
        )
        assert format_outcome(outcome) == "  ❌ https://example.com/x → Status: 404"

    def test_external_error(self):
        outcome = _outcome(
            "https://nope.invalid", LinkKind.EXTERNAL, LinkStatus.EXTERNAL_ERROR, "Error: dns"
        )
        assert format_outcome(outcome) == "  ❌ https://nope.invalid → Error: dns"

    def test_anchor(self):
        line = format_outcome(_outcome("#intro", LinkKind.ANCHOR, LinkStatus.SKIPPED_ANCHOR))
        assert line == "  ➡️  #intro (same-file anchor)"

    def test_other(self):
        line = format_outcome(_outcome("mailto:a@b", LinkKind.OTHER, LinkStatus.SKIPPED_OTHER))
        assert line == "  ⚠️  mailto:a@b → Skipped (not a local or HTTP link)"


class TestFormatFileReport:
    """Tests for per-file blocks."""

    def test_no_links(self):
        assert format_file_report(FileReport(path="docs/empty.md")) == [
            "FILE: docs/empty.md",
            "  No hyperlinks found!",
            "",
        ]

    def test_with_links(self):
        report = FileReport(
            path="docs/a.md",
            outcomes=(_outcome("#top", LinkKind.ANCHOR, LinkStatus.SKIPPED_ANCHOR),),
        )
        assert format_file_report(report) == [
            "FILE: docs/a.md",
            "  1 links found:",
            "  ➡️  #top (same-file anchor)",
            "",
        ]

    def test_read_error(self):
        lines = format_file_report(FileReport(path="docs/bin.md", error="invalid start byte"))
        assert lines[1] == "  ❌ Could not read file → invalid start byte"


class TestConsoleReporter:
    """Tests for streamed output."""

    def test_full_report(self):
        stream = io.StringIO()
        reporter = ConsoleReporter(stream)
        report = FileReport(
            path="docs/a.md",
            outcomes=(
                _outcome("/docs/gone.md", LinkKind.INTERNAL, LinkStatus.NOT_FOUND, "File not found"),
            ),
        )
        reporter.start()
        reporter.file_checked(report)
        reporter.finish(RunReport.of(report))
        assert stream.getvalue() == (
            "📝 Checking markdown links...\n"
            "\n"
            "\n"
            "FILE: docs/a.md\n"
            "  1 links found:\n"
            "  ❌ /docs/gone.md → File not found\n"
            "\n"
            "❌ Some links are invalid!\n"
        )

    def test_summary_valid(self):
        assert format_summary(RunReport()) == "✅ All links are valid!"
