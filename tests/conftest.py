import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import ticketsystem.models  # noqa: F401
from ticketsystem.database import Base, get_db
from ticketsystem.main import app
from ticketsystem.middleware.rate_limit import limiter
from ticketsystem.models.holder import Holder
from ticketsystem.models.ticket import Ticket
from ticketsystem.services.auth import AuthService
from ticketsystem.services.event import EventService

UNIT = 10 ** 18
ISSUER = "issuer"
ATTENDEE1 = "attendee1"
ATTENDEE2 = "attendee2"
START_DATE = 1594095567


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def event(db):
    return EventService.create_event(
        db,
        name="MyConcert",
        symbol="MC",
        start_date=START_DATE,
        supply_cap=100,
        base_price=UNIT,
        price_multiple_cap=2,
        transfer_fee_percent=20,
        issuer=ISSUER
    )


@pytest.fixture
def client(db, event):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    limiter.enabled = False
    with TestClient(app) as test_client:
        yield test_client
    limiter.enabled = True
    app.dependency_overrides.clear()


def auth_headers(identity: str) -> dict:
    return {"Authorization": f"Bearer {AuthService.create_access_token(identity)}"}


def assert_ledger_consistent(db):
    """Every holder's count matches the ticket records they own."""
    for holder in db.query(Holder).all():
        owned = db.query(Ticket).filter(Ticket.owner == holder.identity).count()
        assert holder.ticket_count == owned, holder.identity
