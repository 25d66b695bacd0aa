"""
Shared pytest fixtures.

Key patterns:

1. Database Isolation: Each test gets a fresh temporary SQLite file
2. DI Override: app.dependency_overrides injects test services into the real routers
3. Seeded variants: the demonstration data set loaded through SeedService

Fixture Hierarchy:
    temp_db → repositories → services → test_app → client
    temp_db → seeded_db → seeded services → seeded_client
"""
import os
import tempfile
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Configure the service before any core.config import reads the environment
TEST_API_KEY = "test-api-key-for-testing-purposes-12345678"
os.environ["HOSPITAL_SVC_API_KEY"] = TEST_API_KEY
os.environ["HOSPITAL_SVC_DB_DIR"] = tempfile.mkdtemp(prefix="hospital_svc_tests_")

from repositories import Database, ReportRepository
from services import HospitalRecordsService, ReportService, SeedService
from core import dependencies as deps
from core.auth import verify_api_key
from core.exceptions import setup_exception_handlers


@pytest.fixture
def temp_db():
    """Create a fresh SQLite database in a temp file."""
    fd, db_path = tempfile.mkstemp(suffix='.db')
    os.close(fd)

    db = Database(db_path=db_path)
    yield db

    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def repositories(temp_db):
    """One repository per entity table, keyed by service constructor argument."""
    return deps.get_repositories(temp_db)


@pytest.fixture
def records_service(repositories):
    return HospitalRecordsService(**repositories)


@pytest.fixture
def report_service(temp_db):
    return ReportService(report_repository=ReportRepository(db=temp_db))


@pytest.fixture
def seed_service(repositories):
    return SeedService(**repositories)


@pytest.fixture
def seeded_db(temp_db, seed_service):
    """The temp database with the demonstration data loaded."""
    seed_service.seed()
    return temp_db


@pytest.fixture
def seeded_report_service(seeded_db):
    return ReportService(report_repository=ReportRepository(db=seeded_db))


def _build_app(db, records_service, report_service) -> FastAPI:
    from api.routers import health_router, entities_router, reports_router

    app = FastAPI(title="Hospital Records API Test")
    setup_exception_handlers(app)

    app.dependency_overrides[deps.get_database] = lambda: db
    app.dependency_overrides[deps.get_records_service] = lambda: records_service
    app.dependency_overrides[deps.get_report_service] = lambda: report_service

    async def skip_auth():
        return TEST_API_KEY
    app.dependency_overrides[verify_api_key] = skip_auth

    app.include_router(health_router)
    app.include_router(entities_router)
    app.include_router(reports_router)
    return app


@pytest.fixture
def test_app(temp_db, records_service, report_service):
    """FastAPI app with the real routers wired to an empty test database."""
    app = _build_app(temp_db, records_service, report_service)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app):
    return TestClient(test_app)


@pytest.fixture
def seeded_client(seeded_db, records_service):
    """Test client over a database holding the demonstration data."""
    app = _build_app(
        seeded_db,
        records_service,
        ReportService(report_repository=ReportRepository(db=seeded_db)),
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
