"""
Dashboard API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fintrack.dependencies import get_db, get_transaction_filter
from fintrack.exceptions import StoreUnavailableError
from fintrack.schemas.filters import TransactionFilter
from fintrack.schemas.summary import DashboardResponse
from fintrack.services.dashboard_service import build_dashboard
from fintrack.services.ledger_store import LedgerStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    criteria: TransactionFilter = Depends(get_transaction_filter),
    db: Session = Depends(get_db)
):
    """
    Totals, category and month breakdowns for the filtered transactions,
    plus budget usage and insights for the current month.
    """
    try:
        snapshot = LedgerStore(db).get_snapshot()
    except StoreUnavailableError:
        raise HTTPException(status_code=500, detail="Database query failed")
    return build_dashboard(snapshot, criteria)
