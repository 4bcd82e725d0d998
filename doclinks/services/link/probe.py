"""External URL reachability probe."""

import logging
from typing import Optional

import requests

from doclinks.models.link import LinkKind, LinkRecord
from doclinks.models.result import LinkOutcome, LinkStatus

logger = logging.getLogger(__name__)


class UrlProbe:
    """Checks external links with a single HEAD request each."""

    DEFAULT_TIMEOUT = 5.0  # seconds

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the probe.

        Args:
            timeout: Per-request timeout in seconds
            session: Optional requests session; module-level `requests.head`
                is used when omitted
        """
        self.timeout = timeout
        self.session = session

    def _head(self, url: str) -> requests.Response:
        if self.session is not None:
            return self.session.head(url, timeout=self.timeout)
        return requests.head(url, timeout=self.timeout)

    def check(self, link: LinkRecord) -> LinkOutcome:
        """
        Probe an external link. No retries: one failed attempt is final.

        Args:
            link: Link whose target is a fully-qualified http(s) URL

        Returns:
            EXTERNAL_OK when the response status is ok (below 400),
            EXTERNAL_ERROR with the status code, or with the transport or
            URL parse error otherwise
        """
        url = link.url
        try:
            response = self._head(url)
        except (requests.RequestException, ValueError) as e:
            logger.debug("HEAD %s failed: %s", url, e)
            return LinkOutcome(
                link=link,
                kind=LinkKind.EXTERNAL,
                status=LinkStatus.EXTERNAL_ERROR,
                detail=f"Error: {e}",
            )

        logger.debug("HEAD %s -> %s", url, response.status_code)
        if response.ok:
            return LinkOutcome(link=link, kind=LinkKind.EXTERNAL, status=LinkStatus.EXTERNAL_OK)
        return LinkOutcome(
            link=link,
            kind=LinkKind.EXTERNAL,
            status=LinkStatus.EXTERNAL_ERROR,
            detail=f"Status: {response.status_code}",
        )
