"""Shared test fixtures."""

from pathlib import Path

import httpx
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from ao3nav.models import Base
from ao3nav.scraper.client import ArchiveClient

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture():
    """Return a helper that reads an HTML fixture file."""

    def _load(name: str) -> str:
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")

    return _load


@pytest.fixture
def session():
    """An in-memory database session with all tables created."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine, expire_on_commit=False) as session:
        yield session
    engine.dispose()


@pytest.fixture
def client_factory():
    """Return a helper that builds ArchiveClient factories over a mock handler."""

    def _factory(handler):
        transport = httpx.MockTransport(handler)
        return lambda: ArchiveClient(timeout=5.0, transport=transport)

    return _factory


def html_response(body: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        text=body,
        headers={"content-type": "text/html; charset=utf-8"},
    )
