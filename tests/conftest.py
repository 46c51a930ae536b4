"""
pytest configuration and fixtures.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.database import create_db_engine, create_session_factory, init_db
from app.main import create_app
from app.services.student.datastore import StudentDatastore


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file."""
    return Settings(DATABASE_PATH=str(tmp_path / "students.db"), LOG_LEVEL="DEBUG")


@pytest.fixture
def engine(settings):
    engine = create_db_engine(settings)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def datastore(engine) -> StudentDatastore:
    return StudentDatastore(create_session_factory(engine))


@pytest.fixture
def client(settings) -> Generator[TestClient, None, None]:
    """Test client with the app lifespan running."""
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def strict_client(settings) -> Generator[TestClient, None, None]:
    """Test client whose update/delete report unknown NIMs as 404."""
    strict = settings.model_copy(update={"REPORT_MISSING_ON_MUTATION": True})
    with TestClient(create_app(strict)) as client:
        yield client


@pytest.fixture
def sample_student() -> dict:
    return {
        "nim": "13519001",
        "name": "Budi Santoso",
        "age": 20,
        "address": "Jl. Ganesha 10, Bandung",
    }
