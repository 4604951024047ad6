"""
Transaction database model.
"""

import enum
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Date, Numeric, Text, Enum, Index
from fintrack.database import Base


class TransactionType(str, enum.Enum):
    """Transaction type enumeration."""
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class Transaction(Base):
    """Transaction model. The amount is a magnitude; the sign comes from ``type``."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False, index=True)
    type = Column(Enum(TransactionType, native_enum=False, length=16), nullable=False)
    category = Column(String(255), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    description = Column(Text, default="", nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("idx_transaction_date_id", "date", "id"),
        Index("idx_transaction_category", "category"),
    )
