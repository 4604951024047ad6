"""
Field access shared by the filter and aggregation engines.

Records may be ORM rows, pydantic models or plain mappings (for example rows
decoded from JSON), so every read goes through these helpers and degrades to
a neutral value instead of raising.
"""

from collections.abc import Mapping
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

CENT = Decimal("0.01")
ZERO = Decimal("0")


def field(record: Any, name: str, default: Any = None) -> Any:
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def record_type(record: Any) -> str:
    value = field(record, "type")
    value = getattr(value, "value", value)
    if not isinstance(value, str):
        return ""
    return value.upper()


def record_category(record: Any) -> str:
    value = field(record, "category")
    return value if isinstance(value, str) else ""


def record_description(record: Any) -> str:
    value = field(record, "description")
    return value if isinstance(value, str) else ""


def record_amount(record: Any) -> Decimal:
    value = field(record, "amount")
    if value is None or isinstance(value, bool):
        return ZERO
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except (InvalidOperation, ValueError):
            return ZERO
    if not value.is_finite():
        return ZERO
    # Sums run over whole cents so rounded totals stay additive
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def record_date(record: Any) -> Optional[date]:
    """Return the record's calendar date, or None when missing or unparsable."""
    value = field(record, "date")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def to_money(value: Any) -> Decimal:
    """Quantise a sum to cents. None (an empty SQL SUM) becomes zero."""
    if value is None:
        return ZERO.quantize(CENT)
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT)


def month_key(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}"
