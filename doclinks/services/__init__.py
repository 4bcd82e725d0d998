"""Service layer for link checking."""

from doclinks.services.link_service import LinkCheckService

__all__ = ["LinkCheckService"]
