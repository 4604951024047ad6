"""
Server-side summaries computed in SQL.

These mirror the in-process aggregation engine and must return the same
figures for the same rows.
"""

import logging
from datetime import date
from typing import List, Tuple

from sqlalchemy import case, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fintrack.exceptions import StoreUnavailableError
from fintrack.models.transaction import Transaction, TransactionType
from fintrack.schemas.summary import CategorySummary, MonthTotals, Overview
from fintrack.services.records import to_money

logger = logging.getLogger(__name__)


def _sum_of(txn_type: TransactionType):
    return func.sum(case((Transaction.type == txn_type, Transaction.amount), else_=0))


def _count_of(txn_type: TransactionType):
    return func.count(case((Transaction.type == txn_type, 1)))


def month_bounds(month: str) -> Tuple[date, date]:
    """Return [start, end) dates for a ``YYYY-MM`` month key."""
    year, m = map(int, month.split('-'))
    start_date = date(year, m, 1)
    if m == 12:
        end_date = date(year + 1, 1, 1)
    else:
        end_date = date(year, m + 1, 1)
    return start_date, end_date


def get_overview(db: Session) -> Overview:
    """Totals, balance and counts over the whole store."""
    try:
        row = db.query(
            _sum_of(TransactionType.INCOME).label("total_income"),
            _sum_of(TransactionType.EXPENSE).label("total_expenses"),
            _count_of(TransactionType.INCOME).label("income_count"),
            _count_of(TransactionType.EXPENSE).label("expense_count"),
        ).one()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error generating overview summary: {e}")
        raise StoreUnavailableError("Database summary failed") from e

    total_income = to_money(row.total_income)
    total_expenses = to_money(row.total_expenses)
    return Overview(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=total_income - total_expenses,
        income_count=row.income_count or 0,
        expense_count=row.expense_count or 0,
    )


def get_category_summary(db: Session) -> List[CategorySummary]:
    """Income, expenses and net per category, ordered by category."""
    try:
        rows = (
            db.query(
                Transaction.category,
                _sum_of(TransactionType.INCOME).label("total_income"),
                _sum_of(TransactionType.EXPENSE).label("total_expenses"),
            )
            .group_by(Transaction.category)
            .order_by(Transaction.category)
            .all()
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error generating summary by category: {e}")
        raise StoreUnavailableError("Database summary by category failed") from e

    result = []
    for row in rows:
        total_income = to_money(row.total_income)
        total_expenses = to_money(row.total_expenses)
        result.append(CategorySummary(
            category=row.category,
            total_income=total_income,
            total_expenses=total_expenses,
            net=total_income - total_expenses,
        ))
    return result


def get_month_totals(db: Session, month: str) -> MonthTotals:
    """Income and expenses for one ``YYYY-MM`` month across the whole history."""
    start_date, end_date = month_bounds(month)
    try:
        row = db.query(
            _sum_of(TransactionType.INCOME).label("income"),
            _sum_of(TransactionType.EXPENSE).label("expenses"),
        ).filter(
            Transaction.date >= start_date,
            Transaction.date < end_date
        ).one()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error generating month totals for {month}: {e}")
        raise StoreUnavailableError("Database summary failed") from e

    return MonthTotals(
        month=month,
        income=to_money(row.income),
        expenses=to_money(row.expenses),
    )


def previous_month(month: str) -> str:
    start_date, _ = month_bounds(month)
    if start_date.month == 1:
        return f"{start_date.year - 1:04d}-12"
    return f"{start_date.year:04d}-{start_date.month - 1:02d}"
