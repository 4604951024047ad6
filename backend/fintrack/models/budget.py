"""Budget settings model - persisted in database as a singleton row."""

from sqlalchemy import Column, Integer, Numeric, DateTime
from sqlalchemy.sql import func

from fintrack.config import settings as app_settings
from fintrack.database import Base


class BudgetSettings(Base):
    """
    User-configured monthly budget.
    Singleton pattern - only one row with id=1.
    """
    __tablename__ = "budget_settings"

    id = Column(Integer, primary_key=True, default=1)
    monthly_budget = Column(Numeric(12, 2), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


def get_or_create_budget_settings(db) -> BudgetSettings:
    """Get the singleton budget settings, creating with defaults if needed."""
    budget = db.query(BudgetSettings).filter(BudgetSettings.id == 1).first()
    if not budget:
        budget = BudgetSettings(id=1, monthly_budget=app_settings.default_monthly_budget)
        db.add(budget)
        db.commit()
        db.refresh(budget)
    return budget
