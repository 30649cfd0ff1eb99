import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/0")

from typing import Dict, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models, schemas
from app.announcer import Announcer
from app.auth.session import SessionAuthorizer, SessionStore
from app.database import Base, Database
from app.dependencies import get_authorizer, get_orchestrator
from app.errors import AnnouncementError
from app.orchestrator import VIPOrchestrator

SESSION_ID = "a" * 64
REQUESTER = schemas.User(id=42, name="admin")

VIP_IP_ID = 7
VIP_ADDRESS = "10.0.0.100"
SPARE_IP_ID = 8
SPARE_ADDRESS = "10.0.0.101"


def host_mac(host_id: int) -> str:
    return f"00:00:00:00:00:{host_id:02x}"


class RecordingAnnouncer(Announcer):
    def __init__(self):
        self.calls: List[Tuple[str, str]] = []
        self.fail = False

    def announce(self, ip: str, mac: str) -> None:
        self.calls.append((ip, mac))
        if self.fail:
            raise AnnouncementError("switch unreachable")


class FakeSessionStore(SessionStore):
    def __init__(self, sessions: Dict[str, schemas.User]):
        self.sessions = sessions
        self.lookups: List[str] = []

    def get(self, session_id: str) -> Optional[schemas.User]:
        self.lookups.append(session_id)
        return self.sessions.get(session_id)


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    db = factory()
    db.add_all([models.IP(id=i, address=f"10.0.0.{i}") for i in range(1, 5)])
    db.add(models.IP(id=VIP_IP_ID, address=VIP_ADDRESS))
    db.add(models.IP(id=SPARE_IP_ID, address=SPARE_ADDRESS))
    db.add_all(
        [models.Host(id=i, ip_id=i, mac=host_mac(i), description=f"web{i}") for i in range(1, 5)]
    )
    db.commit()
    db.close()

    yield factory
    engine.dispose()


@pytest.fixture
def database(session_factory) -> Database:
    return Database(session_factory)


@pytest.fixture
def announcer() -> RecordingAnnouncer:
    return RecordingAnnouncer()


@pytest.fixture
def orchestrator(database, announcer) -> VIPOrchestrator:
    return VIPOrchestrator(database, announcer)


@pytest.fixture
def session_store() -> FakeSessionStore:
    return FakeSessionStore({SESSION_ID: REQUESTER})


@pytest.fixture
def client(orchestrator, session_store):
    from main import app

    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_authorizer] = lambda: SessionAuthorizer(session_store)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
