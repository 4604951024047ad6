from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fintrack.dependencies import get_db
from fintrack.exceptions import StoreUnavailableError
from fintrack.schemas.settings import BudgetSettingsResponse, BudgetSettingsUpdate
from fintrack.services.ledger_store import LedgerStore

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/budget", response_model=BudgetSettingsResponse)
def get_budget(db: Session = Depends(get_db)):
    try:
        return BudgetSettingsResponse(monthly_budget=LedgerStore(db).get_budget())
    except StoreUnavailableError:
        raise HTTPException(status_code=500, detail="Database query failed")


@router.put("/budget", response_model=BudgetSettingsResponse)
def update_budget(update: BudgetSettingsUpdate, db: Session = Depends(get_db)):
    try:
        return BudgetSettingsResponse(monthly_budget=LedgerStore(db).set_budget(update.monthly_budget))
    except StoreUnavailableError:
        raise HTTPException(status_code=500, detail="Database update failed")
