"""
Transaction schemas.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Any
from datetime import date
from decimal import Decimal

from fintrack.models.transaction import TransactionType
from fintrack.schemas.common import Money


class TransactionBase(BaseModel):
    date: date
    type: TransactionType
    category: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    description: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("category", mode="before")
    @classmethod
    def strip_category(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, value: Any) -> Any:
        return "" if value is None else value


class TransactionCreate(TransactionBase):
    pass


class TransactionUpdate(TransactionBase):
    """Full replacement of every field except the id."""
    pass


class TransactionResponse(BaseModel):
    id: int
    date: date
    type: TransactionType
    category: str
    amount: Money
    description: str

    class Config:
        from_attributes = True


class TransactionListResponse(BaseModel):
    items: list[TransactionResponse]
    total: int


class BulkInsertResponse(BaseModel):
    inserted: int
    message: str
