"""
FastAPI dependencies.
"""

from typing import Generator
from fastapi import Query
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session
from fintrack.database import SessionLocal
from fintrack.schemas.filters import TransactionFilter


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database sessions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_transaction_filter(
    month: str = Query("ALL", description="ALL or a two-digit month, 01-12"),
    type: str = Query("ALL", description="ALL, INCOME or EXPENSE"),
    category: str = Query("ALL"),
    search: str = Query(""),
) -> TransactionFilter:
    """
    Build the filter record from query parameters.
    """
    try:
        return TransactionFilter(month=month, type=type, category=category, search=search)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False))
