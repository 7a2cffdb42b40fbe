"""Shared fixtures for API tests."""
from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from app.db.session import get_session
from app.main import app
from app.models.property import Property
from app.repositories import properties as properties_repo


class DummySession:
    """Session stub that stages added rows and commits or discards them per transaction."""

    def __init__(self) -> None:
        self.pending: list[object] = []
        self.committed: list[object] = []
        self.fail_flush = False
        self.begin_called = 0
        self.rolled_back = 0

    def add(self, obj: object) -> None:
        self.pending.append(obj)

    async def flush(self) -> None:
        if self.fail_flush:
            raise OperationalError("INSERT INTO property", {}, ConnectionRefusedError("connection refused"))

    def begin(self):  # noqa: D401 - mimic SQLAlchemy's async begin
        session = self

        class _Tx:
            async def __aenter__(self_inner):
                session.begin_called += 1
                return session

            async def __aexit__(self_inner, exc_type, exc, tb):
                if exc_type is not None:
                    session.rolled_back += 1
                else:
                    session.committed.extend(session.pending)
                session.pending.clear()
                return False

        return _Tx()


class InMemoryStore:
    """Stands in for the property repository, one clock tick per insert."""

    def __init__(self, session: DummySession) -> None:
        self._session = session
        self.fail_query = False
        self.insert_calls = 0
        self._clock = datetime(2026, 1, 1, tzinfo=timezone.utc)

    @property
    def rows(self) -> list[Property]:
        return list(self._session.committed)

    async def insert_property(self, session, **fields) -> Property:
        self.insert_calls += 1
        self._clock += timedelta(seconds=1)
        record = Property(id=str(uuid4()), created_at=self._clock, **fields)
        session.add(record)
        await session.flush()
        return record

    async def list_properties(self, session) -> list[Property]:
        if self.fail_query:
            raise OperationalError("SELECT property", {}, ConnectionRefusedError("connection refused"))
        return sorted(session.committed, key=lambda row: row.created_at, reverse=True)


@pytest.fixture
def session() -> DummySession:
    return DummySession()


@pytest.fixture
def store(monkeypatch, session: DummySession) -> InMemoryStore:
    store = InMemoryStore(session)
    monkeypatch.setattr(properties_repo, "insert_property", store.insert_property)
    monkeypatch.setattr(properties_repo, "list_properties", store.list_properties)
    return store


@pytest_asyncio.fixture
async def client(session: DummySession, store: InMemoryStore) -> AsyncIterator[AsyncClient]:
    async def override_session():
        yield session

    app.dependency_overrides[get_session] = override_session
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://testserver") as http_client:
            yield http_client
    finally:
        app.dependency_overrides.pop(get_session, None)
