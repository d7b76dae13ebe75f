"""Shared fixtures: in-memory SQLite database and an in-process API client."""

import os

os.environ.setdefault("LOG_FORMAT", "console")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.core.security import get_password_hash
from app.db.base import Base
from app.db.session import get_db
from app.main import app as fastapi_app
from app.models import Job, Profile, User

DEFAULT_PASSWORD = "s3cret-pass"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # pysqlite's implicit transactions break SAVEPOINT; emit BEGIN ourselves
    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "RESUME_STORAGE_TYPE", "local")
    monkeypatch.setattr(settings, "RESUME_STORAGE_DIR", str(tmp_path / "resumes"))

    async def _get_test_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    fastapi_app.dependency_overrides[get_db] = _get_test_db
    transport = ASGITransport(app=fastapi_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def register_and_login(client):
    """Register a user through the API and return Bearer headers for them."""

    async def _register_and_login(email: str, role: str = "student", fullname: str = "Test User"):
        response = await client.post(
            "/api/v1/auth/register",
            json={
                "fullname": fullname,
                "email": email,
                "phone_number": "9876543210",
                "password": DEFAULT_PASSWORD,
                "role": role,
            },
        )
        assert response.status_code == 201, response.text

        response = await client.post(
            "/api/v1/auth/login",
            json={"email": email, "password": DEFAULT_PASSWORD, "role": role},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _register_and_login


@pytest.fixture
def post_job(client):
    """Post a job as the given recruiter and return its JSON."""

    async def _post_job(headers, title: str, requirements, company_name: str = "Acme"):
        response = await client.post(
            "/api/v1/jobs",
            json={"title": title, "company_name": company_name, "requirements": requirements},
            headers=headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _post_job


@pytest.fixture
def make_user(db):
    """Insert a user with a profile directly into the database."""

    async def _make_user(email: str, skills=None, auto_apply: bool = False, role: str = "student") -> User:
        user = User(
            fullname="Direct User",
            email=email,
            phone_number="9876543210",
            password_hash=get_password_hash(DEFAULT_PASSWORD),
            role=role,
        )
        user.profile = Profile(skills=list(skills or []), auto_apply=auto_apply)
        db.add(user)
        await db.commit()
        return user

    return _make_user


@pytest.fixture
def make_job(db):
    """Insert a job directly into the database."""

    async def _make_job(title: str, requirements) -> Job:
        job = Job(title=title, company_name="Acme", requirements=list(requirements))
        db.add(job)
        await db.commit()
        return job

    return _make_job
