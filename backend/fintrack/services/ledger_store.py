"""
Read-only ledger snapshots for the dashboard.

A snapshot bundles the full transaction collection with the monthly budget so
that every dashboard panel is computed from the same data. The budget is only
changed through LedgerStore.set_budget.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fintrack.config import settings
from fintrack.exceptions import StoreUnavailableError
from fintrack.models.budget import get_or_create_budget_settings
from fintrack.schemas.transaction import TransactionResponse
from fintrack.services.records import month_key
from fintrack.services.transaction_service import list_transactions

logger = logging.getLogger(__name__)


def coerce_budget(value: Any, default: Optional[Decimal] = None) -> Decimal:
    """Parse a budget value, falling back to the default when absent, unparsable or negative."""
    default = settings.default_monthly_budget if default is None else default
    if value is None or isinstance(value, bool):
        return default
    try:
        budget = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return default
    if not budget.is_finite() or budget < 0:
        return default
    return budget


@dataclass(frozen=True)
class LedgerSnapshot:
    transactions: Tuple[TransactionResponse, ...]
    monthly_budget: Decimal
    today: date

    @property
    def current_month(self) -> str:
        return month_key(self.today)


class LedgerStore:
    """Session-bound access point for snapshots and the budget setting."""

    def __init__(self, db: Session):
        self.db = db

    def get_budget(self) -> Decimal:
        try:
            budget = get_or_create_budget_settings(self.db)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error fetching budget settings: {e}")
            raise StoreUnavailableError("Database query failed") from e
        return coerce_budget(budget.monthly_budget)

    def set_budget(self, amount: Any) -> Decimal:
        value = coerce_budget(amount)
        try:
            budget = get_or_create_budget_settings(self.db)
            budget.monthly_budget = value
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating budget settings: {e}")
            raise StoreUnavailableError("Database update failed") from e

        logger.info(f"Monthly budget set to {value}")
        return value

    def get_snapshot(self, today: Optional[date] = None) -> LedgerSnapshot:
        transactions = tuple(
            TransactionResponse.model_validate(t) for t in list_transactions(self.db)
        )
        return LedgerSnapshot(
            transactions=transactions,
            monthly_budget=self.get_budget(),
            today=today or date.today(),
        )
