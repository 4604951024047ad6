"""Tests for the transaction store service."""

import pytest
from datetime import date
from decimal import Decimal
from sqlalchemy.exc import OperationalError

from fintrack.exceptions import StoreUnavailableError, TransactionNotFoundError
from fintrack.models.transaction import Transaction, TransactionType
from fintrack.schemas.transaction import TransactionCreate, TransactionUpdate
from fintrack.services import transaction_service


def payload(**fields):
    values = {"date": "2025-01-01", "type": "EXPENSE", "category": "Food", "amount": "12.30"}
    values.update(fields)
    return values


class TestCreateAndList:
    """Test inserting and listing."""

    def test_create_assigns_id(self, db_session):
        """Store assigns an id and defaults the description."""
        created = transaction_service.create_transaction(db_session, TransactionCreate(**payload()))
        assert created.id is not None
        assert created.description == ""
        assert created.amount == Decimal("12.30")
        assert created.type == TransactionType.EXPENSE

    def test_list_is_newest_first(self, db_session, transaction_factory):
        """List orders by date descending."""
        older = transaction_factory(date=date(2025, 1, 1))
        newer = transaction_factory(date=date(2025, 3, 1))
        middle = transaction_factory(date=date(2025, 2, 1))

        rows = transaction_service.list_transactions(db_session)
        assert [r.id for r in rows] == [newer.id, middle.id, older.id]

    def test_list_empty(self, db_session):
        """Empty table lists nothing."""
        assert transaction_service.list_transactions(db_session) == []


class TestBulkCreate:
    """Test bulk insert."""

    def test_normalizes_type_and_amount(self, db_session):
        """Lowercase type and string amount are normalized."""
        rows = [TransactionCreate(date="2025-01-01", type="income", category="X", amount="50")]
        assert transaction_service.bulk_create_transactions(db_session, rows) == 1

        stored = db_session.query(Transaction).one()
        assert stored.type == TransactionType.INCOME
        assert stored.amount == Decimal("50")
        assert stored.description == ""

    def test_rejects_empty_batch(self, db_session):
        """An empty batch is refused."""
        with pytest.raises(ValueError):
            transaction_service.bulk_create_transactions(db_session, [])

    def test_inserts_all_rows(self, db_session):
        """Every row is stored."""
        rows = [TransactionCreate(**payload(category=f"C{i}")) for i in range(5)]
        assert transaction_service.bulk_create_transactions(db_session, rows) == 5
        assert db_session.query(Transaction).count() == 5


class TestUpdateAndDelete:
    """Test update and delete."""

    def test_update_replaces_fields(self, db_session, sample_transaction):
        """All fields except id are replaced."""
        update = TransactionUpdate(**payload(type="income", category="Refund", amount="7", description="Returned"))
        updated = transaction_service.update_transaction(db_session, sample_transaction.id, update)

        assert updated.id == sample_transaction.id
        assert updated.type == TransactionType.INCOME
        assert updated.category == "Refund"
        assert updated.amount == Decimal("7")
        assert updated.description == "Returned"
        assert updated.date == date(2025, 1, 1)

    def test_update_missing_leaves_store_unchanged(self, db_session, sample_transaction):
        """Updating a missing id raises not-found and changes nothing."""
        with pytest.raises(TransactionNotFoundError):
            transaction_service.update_transaction(db_session, 9999, TransactionUpdate(**payload()))

        rows = transaction_service.list_transactions(db_session)
        assert len(rows) == 1
        assert rows[0].category == "Groceries"

    def test_delete_returns_deleted_row(self, db_session, sample_transaction):
        """Delete returns the removed transaction."""
        deleted = transaction_service.delete_transaction(db_session, sample_transaction.id)
        assert deleted.id == sample_transaction.id
        assert deleted.category == "Groceries"
        assert transaction_service.list_transactions(db_session) == []

    def test_delete_missing(self, db_session):
        """Deleting a missing id raises not-found."""
        with pytest.raises(TransactionNotFoundError):
            transaction_service.delete_transaction(db_session, 42)

    def test_get_missing(self, db_session):
        """Getting a missing id raises not-found."""
        with pytest.raises(TransactionNotFoundError):
            transaction_service.get_transaction(db_session, 42)


class TestStoreFailure:
    """Test database failures surface as StoreUnavailableError."""

    def test_list_failure(self, db_session, monkeypatch):
        """A failing query is reported once, not retried."""
        calls = []

        def broken_query(*args, **kwargs):
            calls.append(args)
            raise OperationalError("SELECT", {}, Exception("database is locked"))

        monkeypatch.setattr(db_session, "query", broken_query)
        with pytest.raises(StoreUnavailableError):
            transaction_service.list_transactions(db_session)
        assert len(calls) == 1
