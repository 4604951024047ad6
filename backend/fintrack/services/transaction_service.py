"""Transaction store: CRUD over the transactions table."""

import logging
from typing import List, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fintrack.exceptions import StoreUnavailableError, TransactionNotFoundError
from fintrack.models.transaction import Transaction
from fintrack.schemas.transaction import (
    TransactionCreate,
    TransactionResponse,
    TransactionUpdate,
)

logger = logging.getLogger(__name__)


def _store_failure(db: Session, action: str, exc: Exception) -> StoreUnavailableError:
    db.rollback()
    logger.error(f"Error {action}: {exc}")
    return StoreUnavailableError(f"Database {action} failed")


def list_transactions(db: Session) -> List[Transaction]:
    """All transactions, newest first."""
    try:
        return (
            db.query(Transaction)
            .order_by(Transaction.date.desc(), Transaction.id.desc())
            .all()
        )
    except SQLAlchemyError as e:
        raise _store_failure(db, "fetching transactions", e) from e


def get_transaction(db: Session, transaction_id: int) -> Transaction:
    try:
        transaction = db.query(Transaction).filter(Transaction.id == transaction_id).first()
    except SQLAlchemyError as e:
        raise _store_failure(db, "fetching transaction", e) from e
    if not transaction:
        raise TransactionNotFoundError(transaction_id)
    return transaction


def create_transaction(db: Session, data: TransactionCreate) -> Transaction:
    transaction = Transaction(**data.model_dump())
    try:
        db.add(transaction)
        db.commit()
        db.refresh(transaction)
    except SQLAlchemyError as e:
        raise _store_failure(db, "inserting transaction", e) from e
    return transaction


def bulk_create_transactions(db: Session, rows: Sequence[TransactionCreate]) -> int:
    """Insert every row in a single database transaction; all or nothing."""
    if not rows:
        raise ValueError("Request body must be a non-empty array of transactions")

    try:
        db.add_all([Transaction(**row.model_dump()) for row in rows])
        db.commit()
    except SQLAlchemyError as e:
        raise _store_failure(db, "bulk inserting transactions", e) from e

    logger.info(f"Bulk upload: {len(rows)} transactions added.")
    return len(rows)


def update_transaction(db: Session, transaction_id: int, data: TransactionUpdate) -> Transaction:
    """Replace every field of an existing transaction except its id."""
    transaction = get_transaction(db, transaction_id)

    for field, value in data.model_dump().items():
        setattr(transaction, field, value)

    try:
        db.commit()
        db.refresh(transaction)
    except SQLAlchemyError as e:
        raise _store_failure(db, "updating transaction", e) from e
    return transaction


def delete_transaction(db: Session, transaction_id: int) -> TransactionResponse:
    """Delete a transaction and return it as it was before deletion."""
    transaction = get_transaction(db, transaction_id)
    deleted = TransactionResponse.model_validate(transaction)

    try:
        db.delete(transaction)
        db.commit()
    except SQLAlchemyError as e:
        raise _store_failure(db, "deleting transaction", e) from e
    return deleted
