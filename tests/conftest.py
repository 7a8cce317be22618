"""
Shared test fixtures.

Sets up an isolated test database so tests never touch
the real database. Each test gets a fresh session that
rolls back after the test — no test data persists.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import bookkeeper.models  # noqa: F401  registers every table on Base.metadata
from bookkeeper.chart import ChartOfAccounts, get_chart
from bookkeeper.main import app
from bookkeeper.models.base import Base, get_db
from tests.factories import recordings_from


# SQLite for tests — no external database needed.
TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)

TEST_CHART = {
    "CLASS 1": "Equity and long-term debts",
    "10000": "Equity A",
    "16000": "Equity B",
    "CLASS 2": "Fixed assets",
    "21800": "Equipment",
    "CLASS 4": "Third parties",
    "40000": "Payable",
    "CLASS 5": "Financial accounts",
    "51200": "Bank",
    "CLASS 6": "Expenses",
    "60000": "Expense",
    "CLASS 7": "Income",
    "70000": "Income",
}


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def chart():
    return ChartOfAccounts.from_mapping(TEST_CHART)


@pytest.fixture
def balanced_recordings():
    return recordings_from()


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(db_session, chart):
    """
    Provide a test client with the test database and test chart.

    get_db and get_chart are overridden so the app uses the
    test session and the fixture chart.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_chart] = lambda: chart
    yield TestClient(app)
    app.dependency_overrides.clear()
