import pytest
import os
from datetime import date
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["STORAGE_BACKEND"] = "sql"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from hr_records.core.clock import FixedClock
from hr_records.database import Base, get_db
from hr_records.dependencies import get_clock
from hr_records.main import app
from hr_records.repositories import InMemoryRepository, SqlRepository
from fastapi.testclient import TestClient

# Every date-dependent test runs against this day
TODAY = date(2026, 10, 19)

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# pysqlite needs explicit BEGIN for SAVEPOINT to nest inside the test transaction
@event.listens_for(engine, "connect")
def _disable_pysqlite_transactions(dbapi_connection, connection_record):
    dbapi_connection.isolation_level = None

@event.listens_for(engine, "begin")
def _emit_begin(conn):
    conn.exec_driver_sql("BEGIN")

# Repository commits become savepoint releases inside the per-test transaction
TestingSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=engine, join_transaction_mode="create_savepoint"
)

@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Create tables once for the whole test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def db_session():
    """Get a clean database session for each test function with rollback safety."""
    connection = engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()

@pytest.fixture(scope="function")
def clock():
    return FixedClock(TODAY)

@pytest.fixture(scope="function")
def sql_repository(db_session):
    return SqlRepository(db_session)

@pytest.fixture(scope="function")
def memory_repository():
    return InMemoryRepository()

@pytest.fixture(scope="function", params=["sql", "memory"])
def repository(request):
    """Runs the test once per storage backend."""
    return request.getfixturevalue(f"{request.param}_repository")

@pytest.fixture(scope="function")
def client(db_session, clock):
    """Get a TestClient that uses the test database session via dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

@pytest.fixture(scope="function")
def memory_client(clock):
    """TestClient running on the in-memory backend."""
    app.dependency_overrides[get_clock] = lambda: clock
    with TestClient(app) as c:
        app.state.memory_repository = InMemoryRepository()
        yield c
        app.state.memory_repository = None
    app.dependency_overrides.clear()

@pytest.fixture(scope="function")
def employee(client):
    """Create a default employee through the API."""
    response = client.post(
        "/api/employees",
        json={"full_name": "Ana Souza", "registration_number": "123.456-7", "position": "Analyst"},
    )
    return response.json()
