# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from laliga_tracker.config.settings import AppConfig
from laliga_tracker.infra.db import Database
from laliga_tracker.infra.models import Base
from laliga_tracker.infra.repo.event_ledger import EventLedger
from laliga_tracker.infra.repo.match_repo import MatchRepository
from laliga_tracker.main import create_app

IN_MEMORY_URL = "sqlite:///:memory:"


@pytest.fixture
def database():
    """
    A fresh in-memory SQLite database per test, tables created up front
    and dropped afterwards.
    """
    db = Database(IN_MEMORY_URL)
    db.init_db()
    yield db
    Base.metadata.drop_all(bind=db.engine)
    db.dispose()


@pytest.fixture
def match_repo(database):
    return MatchRepository(database.session_factory)


@pytest.fixture
def ledger(database, match_repo):
    return EventLedger(database.session_factory, match_repo)


@pytest.fixture
def clasico(match_repo):
    """Real Madrid vs Barcelona, no events yet."""
    return match_repo.create_match("Real Madrid", "Barcelona", "2025-05-10")


@pytest.fixture
def failing_session_factory(mocker):
    """
    A session factory whose sessions blow up on every query/flush, as if the
    database were unreachable.
    """
    from sqlalchemy.exc import OperationalError

    factory = mocker.MagicMock(name="session_factory")
    session = factory.return_value
    error = OperationalError("SELECT 1", {}, Exception("unable to open database file"))
    session.query.side_effect = error
    session.get.side_effect = error
    session.flush.side_effect = error
    return factory


@pytest.fixture
def client():
    """
    TestClient around a fully wired app. Entering the context runs the
    lifespan, so storage is set up and torn down per test.
    """
    config = AppConfig(database_url=IN_MEMORY_URL, logs_dir=None)
    with TestClient(create_app(config)) as test_client:
        yield test_client
