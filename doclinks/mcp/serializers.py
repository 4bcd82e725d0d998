"""Report serialization for MCP and HTTP responses."""

from typing import Any

from doclinks.models.link import LinkRecord
from doclinks.models.result import FileReport, LinkOutcome, RunReport


def serialize_link(link: LinkRecord) -> dict[str, Any]:
    return {"text": link.text, "url": link.url, "full": link.full}


def serialize_outcome(outcome: LinkOutcome) -> dict[str, Any]:
    """
    Serialize a link outcome to dictionary.

    Args:
        outcome: Outcome of one link check

    Returns:
        Dictionary with the link fields plus kind, status, validity, detail
        and the candidate paths that were tried
    """
    result = serialize_link(outcome.link)
    result.update(
        {
            "kind": outcome.kind.value,
            "status": outcome.status.value,
            "valid": outcome.valid,
            "skipped": outcome.skipped,
            "detail": outcome.detail,
            "candidates": list(outcome.candidates),
        }
    )
    return result


def serialize_file_report(report: FileReport) -> dict[str, Any]:
    return {
        "path": report.path,
        "valid": report.valid,
        "error": report.error,
        "links": [serialize_outcome(outcome) for outcome in report.outcomes],
    }


def serialize_run_report(run: RunReport) -> dict[str, Any]:
    """
    Serialize a run report with its counters and per-file breakdown.

    Args:
        run: Completed run report

    Returns:
        Dictionary representation of the run
    """
    return {
        "valid": run.valid,
        "exit_code": run.exit_code,
        "files_checked": len(run.files),
        "total_links": run.link_count,
        "checked_links": run.checked_count,
        "skipped_links": run.skipped_count,
        "invalid_links": run.invalid_count,
        "files": [serialize_file_report(report) for report in run.files],
    }
