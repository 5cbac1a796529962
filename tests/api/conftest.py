"""API test fixtures — in-memory database + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - app.state.container rebuilt over the test DB (lifespan does not run under ASGITransport)
    - db_manager patched so the readiness probe sees the test DB
    - Outbound mail replaced by a recording notifier
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

import siakad.infrastructure.database as db_module
import siakad.models  # noqa: F401
from siakad.config import get_settings
from siakad.db.base import Base
from siakad.infrastructure.database import DatabaseSessionManager
from siakad.main import app, build_container


class RecordingNotifier:
    def __init__(self):
        self.emails = []
        self.sms = []

    async def send_email(self, to, subject, body):
        self.emails.append((to, subject, body))

    async def send_sms(self, phone, message):
        self.sms.append((phone, message))


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def sent_mail():
    return RecordingNotifier()


@pytest.fixture
async def client(test_engine, sent_mail):
    """FastAPI test client wired to the test DB."""
    manager = DatabaseSessionManager.from_engine(test_engine)
    original_manager = db_module.db_manager
    db_module.db_manager = manager
    app.state.container = build_container(manager, get_settings(), sent_mail)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    del app.state.container
    db_module.db_manager = original_manager


@pytest.fixture
async def catalog(client):
    """Seed two students and three courses through the API."""
    for body in (
        {"student_id": "S001", "name": "Park Sungho", "email": "s001@university.ac.id",
         "major": "Informatika", "semester": 5, "gpa": 3.4},
        {"student_id": "S005", "name": "Kim Dohyun", "email": "s005@university.ac.id",
         "major": "Informatika", "semester": 5, "gpa": 1.2,
         "academic_status": "SUSPENDED"},
    ):
        assert (await client.post("/api/v1/students", json=body)).status_code == 201
    for body in (
        {"course_code": "CS101", "course_name": "Algoritma", "capacity": 40,
         "enrolled_count": 10, "credits": 3},
        {"course_code": "CS102", "course_name": "Struktur Data", "capacity": 30,
         "enrolled_count": 30, "credits": 3},
        {"course_code": "CS201", "course_name": "Basis Data", "capacity": 35,
         "credits": 3, "prerequisites": ["CS101"]},
    ):
        assert (await client.post("/api/v1/courses", json=body)).status_code == 201
    return client
