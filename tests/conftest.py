"""Fixtures compartilhadas / Shared fixtures."""

import os
import tempfile

API_TOKEN = "test-token"

# Configurar antes de importar o pacote / Configure before importing the package
_DB_PATH = os.path.join(tempfile.mkdtemp(prefix="diario-tests-"), "diario.db")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_PATH}"
os.environ["API_TOKEN"] = API_TOKEN
os.environ["DEBUG"] = "false"
os.environ["CREATE_TABLES"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from diario_api.database import Base, async_session, engine, init_db  # noqa: E402
from diario_api.main import app  # noqa: E402
from diario_api.utils.seed import seed_controle_oleo  # noqa: E402


@pytest.fixture
async def database():
    await init_db()
    async with async_session() as session:
        await seed_controle_oleo(session)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def session(database):
    async with async_session() as s:
        yield s


@pytest.fixture
async def client(database):
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test", headers={"X-API-Token": API_TOKEN}
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def anon_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
