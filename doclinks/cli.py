"""Command-line entry point: check the links of the docs content tree.

Takes no flags. The content root and every other option come from
`doclinks.config.Settings` (environment variables or `.env`).

Exit codes:
    0: every checked link is valid
    1: at least one link or document failed its check
    2: the content root is missing or the settings are invalid
"""

import logging
import sys

from pydantic import ValidationError as SettingsError

from doclinks.config import get_settings
from doclinks.exceptions import LinkCheckError
from doclinks.services.link.reporting import ConsoleReporter
from doclinks.services.link_service import LinkCheckService

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2


def main() -> int:
    """Run the link check and return the process exit code."""
    try:
        settings = get_settings()
    except SettingsError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        stream=sys.stderr,
    )

    reporter = ConsoleReporter(sys.stdout)
    service = LinkCheckService(settings=settings, on_file=reporter.file_checked)

    reporter.start()
    try:
        run = service.check_tree()
    except LinkCheckError as e:
        logger.error("Link check aborted: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    reporter.finish(run)
    logger.info(
        "Checked %d links in %d files, %d invalid",
        run.checked_count,
        len(run.files),
        run.invalid_count,
    )
    return run.exit_code


if __name__ == "__main__":
    sys.exit(main())
