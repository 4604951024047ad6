"""Shared test fixtures."""

import os

# Keep the app's own engine off the filesystem during tests
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import date
from decimal import Decimal

from fintrack.database import Base
from fintrack.dependencies import get_db
from fintrack.main import app
from fintrack.models.transaction import Transaction, TransactionType
from fintrack.models.budget import BudgetSettings


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_transaction(db_session, **fields):
    """Insert a transaction row with sensible defaults."""
    values = {
        "date": date(2025, 1, 15),
        "type": TransactionType.EXPENSE,
        "category": "Groceries",
        "amount": Decimal("10.00"),
        "description": "",
    }
    values.update(fields)
    txn = Transaction(**values)
    db_session.add(txn)
    db_session.commit()
    db_session.refresh(txn)
    return txn


@pytest.fixture
def sample_transaction(db_session):
    """Create a sample expense."""
    return make_transaction(
        db_session,
        date=date(2025, 1, 15),
        type=TransactionType.EXPENSE,
        category="Groceries",
        amount=Decimal("50.00"),
        description="WHOLE FOODS #1234",
    )


@pytest.fixture
def sample_ledger(db_session):
    """Income and expenses across January and February 2025."""
    return [
        make_transaction(db_session, date=date(2025, 1, 1), type=TransactionType.INCOME,
                         category="Salary", amount=Decimal("2000.00"), description="January pay"),
        make_transaction(db_session, date=date(2025, 1, 3), type=TransactionType.EXPENSE,
                         category="Rent", amount=Decimal("800.00"), description="Flat"),
        make_transaction(db_session, date=date(2025, 1, 9), type=TransactionType.EXPENSE,
                         category="Groceries", amount=Decimal("60.10"), description="Market"),
        make_transaction(db_session, date=date(2025, 2, 1), type=TransactionType.INCOME,
                         category="Salary", amount=Decimal("2100.00"), description="February pay"),
        make_transaction(db_session, date=date(2025, 2, 4), type=TransactionType.EXPENSE,
                         category="Groceries", amount=Decimal("40.20"), description="Corner shop"),
        make_transaction(db_session, date=date(2025, 2, 10), type=TransactionType.INCOME,
                         category="Groceries", amount=Decimal("5.00"), description="Refund"),
    ]


@pytest.fixture
def budget_settings(db_session):
    """Persist a 500.00 monthly budget."""
    budget = BudgetSettings(id=1, monthly_budget=Decimal("500.00"))
    db_session.add(budget)
    db_session.commit()
    db_session.refresh(budget)
    return budget


@pytest.fixture
def transaction_factory(db_session):
    """Insert transactions on demand: ``transaction_factory(amount=Decimal("5"))``."""
    def factory(**fields):
        return make_transaction(db_session, **fields)
    return factory
