"""
Summary API endpoints (computed in SQL).
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from fintrack.dependencies import get_db
from fintrack.exceptions import StoreUnavailableError
from fintrack.schemas.summary import CategorySummary, MonthComparison, Overview
from fintrack.services import summary_service
from fintrack.services.aggregation import compare_months
from fintrack.services.records import month_key

router = APIRouter(prefix="/summary", tags=["summary"])

MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


@router.get("/overview", response_model=Overview)
def get_overview(db: Session = Depends(get_db)):
    """Total income, total expenses, balance and counts"""
    try:
        return summary_service.get_overview(db)
    except StoreUnavailableError:
        raise HTTPException(status_code=500, detail="Database summary failed")


@router.get("/by-category", response_model=list[CategorySummary])
def get_by_category(db: Session = Depends(get_db)):
    """Income, expenses and net per category"""
    try:
        return summary_service.get_category_summary(db)
    except StoreUnavailableError:
        raise HTTPException(status_code=500, detail="Database summary by category failed")


@router.get("/trend", response_model=MonthComparison)
def get_month_over_month(
    current: Optional[str] = Query(None, pattern=MONTH_PATTERN, description="YYYY-MM format"),
    previous: Optional[str] = Query(None, pattern=MONTH_PATTERN, description="YYYY-MM format"),
    db: Session = Depends(get_db)
):
    """
    Compare two months over the whole history.
    Defaults to the current month against the month before it.
    """
    current = current or month_key(date.today())
    previous = previous or summary_service.previous_month(current)

    try:
        return compare_months(
            summary_service.get_month_totals(db, current),
            summary_service.get_month_totals(db, previous),
        )
    except StoreUnavailableError:
        raise HTTPException(status_code=500, detail="Database summary failed")
