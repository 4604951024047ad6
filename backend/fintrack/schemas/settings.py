from decimal import Decimal

from pydantic import BaseModel, Field

from fintrack.schemas.common import Money


class BudgetSettingsResponse(BaseModel):
    monthly_budget: Money


class BudgetSettingsUpdate(BaseModel):
    monthly_budget: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
