"""
Filter engine for transaction list views.

Applies a TransactionFilter to the full, ordered transaction collection. All
predicates must hold for a record to be kept; the input order is preserved.
"""

from typing import Any, Iterable, List

from fintrack.schemas.filters import ALL, TransactionFilter
from fintrack.services.records import (
    record_category,
    record_date,
    record_description,
    record_type,
)


def matches_month(record: Any, month: str) -> bool:
    if month == ALL:
        return True
    d = record_date(record)
    if d is None:
        return False
    return f"{d.month:02d}" == month


def matches_type(record: Any, txn_type: str) -> bool:
    return txn_type == ALL or record_type(record) == txn_type


def matches_category(record: Any, category: str) -> bool:
    return category == ALL or record_category(record) == category


def matches_search(record: Any, search: str) -> bool:
    if not search:
        return True
    needle = search.lower()
    return (
        needle in record_description(record).lower()
        or needle in record_category(record).lower()
    )


def matches(record: Any, criteria: TransactionFilter) -> bool:
    return (
        matches_month(record, criteria.month)
        and matches_type(record, criteria.type)
        and matches_category(record, criteria.category)
        and matches_search(record, criteria.search)
    )


def filter_transactions(transactions: Iterable[Any], criteria: TransactionFilter) -> List[Any]:
    """Return the records satisfying every active predicate, in input order."""
    if criteria.is_empty:
        return list(transactions)
    return [t for t in transactions if matches(t, criteria)]


def distinct_categories(transactions: Iterable[Any]) -> List[str]:
    """Categories in first-seen order, for populating the category filter."""
    seen = {}
    for t in transactions:
        seen.setdefault(record_category(t), None)
    return list(seen)
