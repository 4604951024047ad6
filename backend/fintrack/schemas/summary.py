"""
Summary and dashboard schemas.
"""

import enum
from pydantic import BaseModel
from typing import List, Optional

from fintrack.schemas.common import Money
from fintrack.schemas.filters import TransactionFilter


class Overview(BaseModel):
    total_income: Money
    total_expenses: Money
    balance: Money
    income_count: int
    expense_count: int


class CategorySummary(BaseModel):
    category: str
    total_income: Money
    total_expenses: Money
    net: Money


class CategoryBreakdown(BaseModel):
    """Expense totals per category, aligned by index."""
    categories: List[str]
    totals: List[Money]


class MonthlyBreakdown(BaseModel):
    """Income and expense totals per calendar month, aligned by index."""
    months: List[str]
    month_keys: List[str]
    income_by_month: List[Money]
    expenses_by_month: List[Money]


class MonthTotals(BaseModel):
    month: str
    income: Money
    expenses: Money


class MetricChange(BaseModel):
    current: Money
    previous: Money
    delta: Money
    delta_percent: Optional[float]


class MonthComparison(BaseModel):
    current_month: str
    previous_month: str
    income: MetricChange
    expenses: MetricChange


class BudgetStatus(str, enum.Enum):
    on_track = "On track"
    close_to_limit = "Close to limit"
    over_budget = "Over budget"


class BudgetUsage(BaseModel):
    month: str
    monthly_budget: Money
    spent: Money
    remaining: Money
    usage_percent: float
    status: BudgetStatus


class DashboardResponse(BaseModel):
    filter: TransactionFilter
    transaction_count: int
    overview: Overview
    expense_breakdown: CategoryBreakdown
    monthly_breakdown: MonthlyBreakdown
    budget: BudgetUsage
    insights: List[str]
