"""
Transaction API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fintrack.dependencies import get_db, get_transaction_filter
from fintrack.exceptions import StoreUnavailableError, TransactionNotFoundError
from fintrack.schemas.filters import TransactionFilter
from fintrack.schemas.transaction import (
    BulkInsertResponse,
    TransactionCreate,
    TransactionListResponse,
    TransactionResponse,
    TransactionUpdate,
)
from fintrack.services import transaction_service
from fintrack.services.filtering import distinct_categories, filter_transactions

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=TransactionListResponse)
def list_transactions(
    criteria: TransactionFilter = Depends(get_transaction_filter),
    db: Session = Depends(get_db)
):
    """List transactions, newest first, narrowed by the optional filters"""
    try:
        transactions = transaction_service.list_transactions(db)
    except StoreUnavailableError:
        raise HTTPException(status_code=500, detail="Database query failed")

    items = filter_transactions(transactions, criteria)
    return TransactionListResponse(
        items=[TransactionResponse.model_validate(t) for t in items],
        total=len(items)
    )


@router.get("/categories", response_model=list[str])
def list_categories(db: Session = Depends(get_db)):
    """Distinct categories in the order they first appear"""
    try:
        transactions = transaction_service.list_transactions(db)
    except StoreUnavailableError:
        raise HTTPException(status_code=500, detail="Database query failed")
    return distinct_categories(transactions)


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: int,
    db: Session = Depends(get_db)
):
    """Get a single transaction"""
    try:
        transaction = transaction_service.get_transaction(db, transaction_id)
    except TransactionNotFoundError:
        raise HTTPException(status_code=404, detail="Transaction not found")
    except StoreUnavailableError:
        raise HTTPException(status_code=500, detail="Database query failed")
    return TransactionResponse.model_validate(transaction)


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    transaction: TransactionCreate,
    db: Session = Depends(get_db)
):
    """Create a transaction"""
    try:
        created = transaction_service.create_transaction(db, transaction)
    except StoreUnavailableError:
        raise HTTPException(status_code=500, detail="Database insert failed")
    return TransactionResponse.model_validate(created)


@router.post("/bulk", response_model=BulkInsertResponse, status_code=201)
def bulk_create_transactions(
    transactions: list[TransactionCreate],
    db: Session = Depends(get_db)
):
    """Insert a batch of transactions (e.g. rows parsed from a CSV upload)"""
    if not transactions:
        raise HTTPException(
            status_code=400,
            detail="Request body must be an array of transactions"
        )
    try:
        inserted = transaction_service.bulk_create_transactions(db, transactions)
    except StoreUnavailableError:
        raise HTTPException(status_code=500, detail="Database bulk insert failed")
    return BulkInsertResponse(
        inserted=inserted,
        message=f"Inserted {inserted} transactions."
    )


@router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: int,
    update: TransactionUpdate,
    db: Session = Depends(get_db)
):
    """Replace all fields of a transaction"""
    try:
        transaction = transaction_service.update_transaction(db, transaction_id, update)
    except TransactionNotFoundError:
        raise HTTPException(status_code=404, detail="Transaction not found")
    except StoreUnavailableError:
        raise HTTPException(status_code=500, detail="Database update failed")
    return TransactionResponse.model_validate(transaction)


@router.delete("/{transaction_id}", response_model=TransactionResponse)
def delete_transaction(
    transaction_id: int,
    db: Session = Depends(get_db)
):
    """Delete a transaction and return it"""
    try:
        return transaction_service.delete_transaction(db, transaction_id)
    except TransactionNotFoundError:
        raise HTTPException(status_code=404, detail="Transaction not found")
    except StoreUnavailableError:
        raise HTTPException(status_code=500, detail="Database delete failed")
