"""
Seed script for demo transactions.

Usage:
  python -m fintrack.seed
"""

import logging
from datetime import date
from decimal import Decimal

from fintrack.database import SessionLocal, init_db
from fintrack.models import Transaction, TransactionType

logger = logging.getLogger(__name__)


def _months_back(today: date, months: int) -> date:
    year, month = today.year, today.month - months
    while month <= 0:
        month += 12
        year -= 1
    return date(year, month, 1)


def demo_transactions(today: date) -> list[dict]:
    """Three months of salary, rent and day-to-day spending ending this month."""
    rows = []
    for offset in (2, 1, 0):
        first = _months_back(today, offset)
        rows.extend([
            {"date": first, "type": TransactionType.INCOME, "category": "Salary",
             "amount": Decimal("2500.00"), "description": "Monthly salary"},
            {"date": first.replace(day=2), "type": TransactionType.EXPENSE, "category": "Rent",
             "amount": Decimal("950.00"), "description": "Apartment rent"},
            {"date": first.replace(day=5), "type": TransactionType.EXPENSE, "category": "Groceries",
             "amount": Decimal("84.35"), "description": "Weekly shop"},
            {"date": first.replace(day=12), "type": TransactionType.EXPENSE, "category": "Transport",
             "amount": Decimal("45.00"), "description": "Monthly bus pass"},
            {"date": first.replace(day=18), "type": TransactionType.EXPENSE, "category": "Dining",
             "amount": Decimal("32.50"), "description": "Dinner out"},
        ])
    return rows


def seed_transactions(today: date = None) -> int:
    """Seed demo transactions into an empty database. Returns rows inserted."""
    init_db()
    db = SessionLocal()

    try:
        existing_count = db.query(Transaction).count()
        if existing_count > 0:
            logger.info(f"Transactions already seeded ({existing_count} transactions exist)")
            return 0

        rows = demo_transactions(today or date.today())
        db.add_all([Transaction(**row) for row in rows])
        db.commit()
        logger.info(f"Seeded {len(rows)} demo transactions")
        return len(rows)
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_transactions()
