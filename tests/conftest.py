"""Pytest configuration and fixtures for filekeeper.

Environment is set before filekeeper.main is imported so create_app() sees an
in-memory SQLite database and the local backend. HTTP tests override the
backend per test and run once on local disk and once on moto S3. Each
DB-backed test gets a fresh schema; the engine is disposed afterwards so
the next test (and its event loop) starts with a new in-memory database.
"""

import os
import tempfile

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["STORAGE_BACKEND"] = "local"
os.environ.setdefault("STORAGE_ROOT", tempfile.mkdtemp(prefix="filekeeper-test-"))

import boto3  # noqa: E402
import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from moto import mock_aws  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from filekeeper.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from filekeeper.api.dependencies import get_storage_service  # noqa: E402
from filekeeper.infrastructure.external.storage.local_storage import (  # noqa: E402
    LocalStorageService,
)
from filekeeper.infrastructure.external.storage.s3_storage import S3StorageService  # noqa: E402
from filekeeper.infrastructure.persistence import models  # noqa: E402,F401
from filekeeper.infrastructure.persistence.database import (  # noqa: E402
    Base,
    dispose_engine,
    get_engine,
    get_session_factory,
)
from filekeeper.main import app  # noqa: E402


@pytest.fixture
async def db_schema():
    """Create all tables on a fresh in-memory database; dispose the engine after."""
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await dispose_engine()


@pytest.fixture
async def db_session(db_schema) -> AsyncSession:
    """Database session for repository/integration tests."""
    async with get_session_factory()() as session:
        yield session


TEST_BUCKET_NAME = "filekeeper-test"


@pytest.fixture
def mocked_aws(monkeypatch):
    """Fake credentials and a mocked S3 with the test bucket created."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    with mock_aws():
        boto3.client("s3", region_name="us-east-1").create_bucket(Bucket=TEST_BUCKET_NAME)
        yield


@pytest.fixture(params=["local", "s3"])
def storage(request, tmp_path):
    """Storage backend for HTTP tests; every scenario runs against both backends."""
    if request.param == "s3":
        request.getfixturevalue("mocked_aws")
        return S3StorageService(bucket=TEST_BUCKET_NAME, region="us-east-1")
    return LocalStorageService(tmp_path / "files")


@pytest.fixture
async def client(db_schema, storage) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with per-test storage."""
    app.dependency_overrides[get_storage_service] = lambda: storage
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
