# tests/conftest.py
import shutil
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from pagecraft.config import settings
from pagecraft.database import Base, make_engine, make_session_factory
from pagecraft.main import create_app
from pagecraft.storage import MemoryStore, SqlStore, seed_sample_data

SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="session")
def temp_storage_dir():
    """Create temporary storage directory for test files"""
    temp_dir = tempfile.mkdtemp()
    Path(temp_dir, "logs").mkdir(parents=True, exist_ok=True)
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture(autouse=True)
def override_settings(temp_storage_dir):
    """Override settings for testing"""
    original_storage = settings.STORAGE_PATH
    original_logs = settings.LOGS_PATH
    original_seed = settings.SEED_SAMPLE_DATA

    settings.STORAGE_PATH = temp_storage_dir
    settings.LOGS_PATH = temp_storage_dir / "logs"

    yield

    settings.STORAGE_PATH = original_storage
    settings.LOGS_PATH = original_logs
    settings.SEED_SAMPLE_DATA = original_seed


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def sql_store():
    """SqlStore over a private in-memory SQLite database"""
    engine = make_engine(SQLALCHEMY_TEST_DATABASE_URL, poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield SqlStore(make_session_factory(engine))
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def store(request):
    """Every backend, for tests of the shared repository contract"""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture(params=["memory", "sql"])
def seeded_store(request):
    """Sample contract loaded into each backend in turn"""
    store = request.getfixturevalue(f"{request.param}_store")
    seed_sample_data(store)
    return store


@pytest.fixture
def sample_document(seeded_store):
    return seeded_store.list_documents()[0]


@pytest.fixture
def sample_pages(seeded_store, sample_document):
    return seeded_store.get_document_pages(sample_document.id)


@pytest.fixture
def client(seeded_store):
    """Test client around the seeded store, once per backend"""
    with TestClient(create_app(seeded_store)) as test_client:
        yield test_client


@pytest.fixture
def empty_client(store):
    with TestClient(create_app(store)) as test_client:
        yield test_client
