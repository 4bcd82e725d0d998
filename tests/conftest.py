"""Shared pytest fixtures and test utilities for Doc-Links tests."""

import os
from pathlib import Path
from typing import Callable, Generator
from unittest.mock import patch

import pytest
import requests

from doclinks.config import Settings, get_settings
from doclinks.services.link.probe import UrlProbe
from doclinks.services.link_service import LinkCheckService


def make_response(status_code: int, url: str = "https://example.com") -> requests.Response:
    """Build a real requests.Response with the given status."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.reason = "OK" if status_code < 400 else "Error"
    return response


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch) -> Generator[None, None, None]:
    """Keep DOCLINKS_* variables and the settings cache out of every test."""
    for key in list(os.environ):
        if key.upper().startswith("DOCLINKS_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def site(tmp_path, monkeypatch) -> Path:
    """
    Create an empty site checkout with a docs/ content root.

    The working directory is switched to the checkout so the default
    settings (content root `docs`, base directory `.`) apply.

    Yields:
        Path of the checkout
    """
    (tmp_path / "docs").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_doc(site) -> Callable[[str, str], Path]:
    """Write a document relative to the site checkout."""

    def _write(relative: str, content: str) -> Path:
        path = site / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings(site) -> Settings:
    """Default settings, ignoring any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def fake_head():
    """
    Patch requests.head with a status lookup.

    Yields:
        (statuses, mock): `statuses` maps URL to status code (default 200);
        a value that is an exception instance is raised instead
    """
    statuses: dict = {}

    def _head(url, timeout=None, **kwargs):
        status = statuses.get(url, 200)
        if isinstance(status, Exception):
            raise status
        return make_response(status, url)

    with patch("requests.head", side_effect=_head) as mock:
        yield statuses, mock


@pytest.fixture
def service(settings, fake_head) -> LinkCheckService:
    """Link check service over the site checkout with network probes patched."""
    return LinkCheckService(settings=settings, probe=UrlProbe(timeout=settings.request_timeout))
