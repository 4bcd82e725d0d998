"""Basic usage example for the Doc-Links service layer."""

import tempfile
from pathlib import Path

from doclinks.config import Settings
from doclinks.mcp.serializers import serialize_run_report
from doclinks.services.link.extraction import extract_links
from doclinks.services.link.reporting import ConsoleReporter
from doclinks.services.link_service import LinkCheckService


def main():
    """Build a small content tree and check it with the probing policy."""
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp) / "docs"
        (root / "guide").mkdir(parents=True)
        (root / "guide" / "index.md").write_text("# Guide\n\n[Back](/index#top)\n")
        (root / "index.md").write_text(
            "# Home\n\n"
            "- [Guide](/guide)\n"
            "- [Missing](/missing-page)\n"
            "- [Contents](#contents)\n"
            "- [Mail](mailto:docs@example.com)\n"
        )

        # Extraction alone needs no settings
        for link in extract_links((root / "index.md").read_text()):
            print(f"Found link: {link.text} -> {link.url}")

        # Check the tree, streaming the console report
        settings = Settings(_env_file=None, content_root=str(root), resolution_policy="probe")
        reporter = ConsoleReporter()
        service = LinkCheckService(settings=settings, on_file=reporter.file_checked)
        reporter.start()
        run = service.check_tree()
        reporter.finish(run)

        summary = serialize_run_report(run)
        print(f"\nFiles: {summary['files_checked']}, invalid links: {summary['invalid_links']}")


if __name__ == "__main__":
    main()
