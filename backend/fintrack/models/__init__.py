"""
Database models package.
"""

from fintrack.models.transaction import Transaction, TransactionType
from fintrack.models.budget import BudgetSettings, get_or_create_budget_settings

__all__ = [
    "Transaction",
    "TransactionType",
    "BudgetSettings",
    "get_or_create_budget_settings",
]
