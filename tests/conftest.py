"""Shared fixtures: in-memory SQLite, a TestClient, signed-up profiles, captured email."""
import os

# Must be set before sunescape.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["MAILGUN_API_KEY"] = ""
os.environ["SENDGRID_API_KEY"] = ""
os.environ["VAPID_PUBLIC_KEY"] = ""
os.environ["VAPID_PRIVATE_KEY"] = ""
os.environ["TOTAL_ROOMS_DEFAULT"] = "5"

import pytest
from fastapi.testclient import TestClient

from sunescape.database import Base, SessionLocal, engine
from sunescape.main import app
from sunescape.models.profile import Profile, ProfileRole
from sunescape.services import notifications


@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sent_emails(monkeypatch):
    """Replace the provider call; every outgoing email lands in this list."""
    sent = []

    def fake_send(to_email, subject, html_content, text_content=None):
        sent.append({"to": to_email, "subject": subject, "html": html_content})
        return True

    monkeypatch.setattr(notifications, "send_email", fake_send)
    return sent


class Member:
    def __init__(self, client, email, first_name, password="secret123"):
        r = client.post(
            "/auth/register",
            json={
                "first_name": first_name,
                "last_name": "Test",
                "email": email,
                "password": password,
                "confirm_password": password,
            },
        )
        assert r.status_code == 200, r.text
        body = r.json()
        self.id = body["profile"]["id"]
        self.email = email
        self.name = first_name
        self.headers = {"Authorization": f"Bearer {body['access_token']}"}


@pytest.fixture
def signup(client, sent_emails):
    def _signup(email, first_name):
        return Member(client, email, first_name)

    return _signup


@pytest.fixture
def alice(signup):
    return signup("alice@example.com", "Alice")


@pytest.fixture
def bob(signup):
    return signup("bob@example.com", "Bob")


@pytest.fixture
def carol(signup):
    return signup("carol@example.com", "Carol")


@pytest.fixture
def admin(signup):
    member = signup("admin@example.com", "Ada")
    session = SessionLocal()
    try:
        profile = session.query(Profile).filter(Profile.id == member.id).first()
        profile.role = ProfileRole.admin
        session.commit()
    finally:
        session.close()
    return member


@pytest.fixture
def reserve(client):
    """POST a reservation as `member`; defaults to 1 room, Jun 1-3 2025."""

    def _reserve(member, **overrides):
        payload = {
            "name": f"{member.name}'s trip",
            "start_date": "2025-06-01",
            "end_date": "2025-06-03",
            "rooms": 1,
        }
        payload.update(overrides)
        r = client.post("/reservations/", json=payload, headers=member.headers)
        assert r.status_code == 200, r.text
        return r.json()

    return _reserve
