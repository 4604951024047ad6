"""
Pydantic schemas package.
"""

from fintrack.schemas.transaction import (
    TransactionBase,
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
    TransactionListResponse,
    BulkInsertResponse,
)
from fintrack.schemas.filters import TransactionFilter
from fintrack.schemas.summary import (
    Overview,
    CategorySummary,
    CategoryBreakdown,
    MonthlyBreakdown,
    MonthTotals,
    MetricChange,
    MonthComparison,
    BudgetStatus,
    BudgetUsage,
    DashboardResponse,
)
from fintrack.schemas.settings import BudgetSettingsResponse, BudgetSettingsUpdate

__all__ = [
    "TransactionBase",
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionResponse",
    "TransactionListResponse",
    "BulkInsertResponse",
    "TransactionFilter",
    "Overview",
    "CategorySummary",
    "CategoryBreakdown",
    "MonthlyBreakdown",
    "MonthTotals",
    "MetricChange",
    "MonthComparison",
    "BudgetStatus",
    "BudgetUsage",
    "DashboardResponse",
    "BudgetSettingsResponse",
    "BudgetSettingsUpdate",
]
