import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.app.services.credential_hasher import hash_secret, normalize_answer
from src.depends import get_unit_of_work
from src.domain.entities import DeanConfig
from tests.fixtures.json_loader import TestDataLoader


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
def session_factory(engine):
    """Independent sessions on the shared database, one per simulated request"""
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    headers = {"User-Agent": TestDataLoader.get("client")["user_agent"]}
    async with AsyncClient(transport=transport, base_url="http://test", headers=headers) as ac:
        yield ac


@pytest_asyncio.fixture
async def dean_config(db_session):
    """Seeded singleton, as scripts/seed.py would leave it"""
    dean = TestDataLoader.get("dean")
    config = DeanConfig(
        master_key_hash=hash_secret(dean["master_key"]),
        security_question=dean["security_question"],
        security_answer_hash=hash_secret(normalize_answer(dean["security_answer"])),
        backup_code_hash=hash_secret(dean["backup_code"]),
    )
    db_session.add(config)
    await db_session.commit()
    return config


@pytest_asyncio.fixture
async def dean_token(client, dean_config):
    response = await client.post(
        "/auth/dean/login", json={"master_key": TestDataLoader.get("dean")["master_key"]}
    )
    assert response.status_code == 200
    return response.json()["session_token"]


@pytest_asyncio.fixture
async def dean_headers(dean_token):
    return {"Authorization": f"Bearer {dean_token}"}


@pytest_asyncio.fixture
async def issue_access_key(client, dean_headers):
    """Factory issuing an access key through the Dean API"""

    async def _issue(role: str = "President", validity_days: int = 1) -> dict:
        response = await client.post(
            "/auth/access-keys",
            json={"role": role, "validity_days": validity_days},
            headers=dean_headers,
        )
        assert response.status_code == 201
        return response.json()

    return _issue
