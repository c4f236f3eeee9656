import os
import tempfile
from pathlib import Path
from uuid import uuid4

import httpx
import pytest

DEFAULT_TEST_DB_URL = f"sqlite:///{Path(tempfile.gettempdir()) / 'tracker_admin_test.db'}"
TEST_DB_URL = os.getenv("TEST_DB_URL", DEFAULT_TEST_DB_URL)
os.environ["DATABASE_URL"] = TEST_DB_URL
os.environ["TRACKER_URL"] = "http://tracker.test"

from sqlmodel import Session

from app.core.config import settings
from app.db.init_db import init_db
from app.db.session import engine
from app.main import app
from app.models.enums import UserRole
from app.models.torrent import Torrent
from app.models.user import User
from app.services.auth_service import create_access_token
from app.services.tracker_client import TrackerScrapeClient, get_tracker_client

settings.DATABASE_URL = TEST_DB_URL


@pytest.fixture(autouse=True, scope="session")
def _configure_test_database():
    init_db(drop_all=True)
    yield


@pytest.fixture
def db():
    init_db(drop_all=True)
    with Session(engine) as session:
        yield session


@pytest.fixture
def make_user(db):
    def _make(role: UserRole = UserRole.USER, banned: bool = False, username: str | None = None) -> User:
        user = User(username=username or f"user-{uuid4().hex[:8]}", role=role, banned=banned)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def make_torrent(db):
    def _make(uploaded_by: str = "uploader", name: str = "Some Torrent") -> Torrent:
        torrent = Torrent(
            info_hash=uuid4().hex[:40],
            name=name,
            description=f"{name} description",
            uploaded_by=uploaded_by,
        )
        db.add(torrent)
        db.commit()
        db.refresh(torrent)
        return torrent

    return _make


@pytest.fixture
def auth_headers():
    def _headers(user: User) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}

    return _headers


@pytest.fixture
def tracker_stub():
    """Route the stats endpoint's tracker calls to a handler chosen by the test."""

    def _install(handler) -> TrackerScrapeClient:
        client = TrackerScrapeClient(
            "http://tracker.test",
            timeout=0.5,
            transport=httpx.MockTransport(handler),
        )
        app.dependency_overrides[get_tracker_client] = lambda: client
        return client

    yield _install
    app.dependency_overrides.pop(get_tracker_client, None)
