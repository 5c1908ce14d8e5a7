"""Shared fixtures: saved Liquipedia pages and a fake HTTP session."""

from __future__ import annotations

from pathlib import Path

import pytest
import requests

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def team_page_html() -> str:
    return (FIXTURE_DIR / "team_page.html").read_text(encoding="utf-8")


@pytest.fixture
def results_page_html() -> str:
    return (FIXTURE_DIR / "results_page.html").read_text(encoding="utf-8")


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Serves canned pages by URL; unknown URLs raise like a dead network."""

    def __init__(self, pages: dict[str, str | int]) -> None:
        self.pages = pages
        self.requested: list[str] = []

    def get(self, url: str, headers=None, timeout=None) -> FakeResponse:
        self.requested.append(url)
        page = self.pages.get(url)
        if page is None:
            raise requests.ConnectionError(f"Connection refused: {url}")
        if isinstance(page, int):
            return FakeResponse("", status_code=page)
        return FakeResponse(page)


@pytest.fixture
def make_session():
    def _make(pages: dict[str, str | int]) -> FakeSession:
        return FakeSession(pages)

    return _make
