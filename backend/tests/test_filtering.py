"""Tests for the transaction filter engine."""

import pytest
from pydantic import ValidationError

from fintrack.schemas.filters import TransactionFilter
from fintrack.services.filtering import distinct_categories, filter_transactions


@pytest.fixture
def ledger():
    """Plain-mapping records as the client would hold them, newest first."""
    return [
        {"id": 5, "date": "2025-03-02", "type": "EXPENSE", "category": "Dining", "amount": "18.00", "description": "Pizza night"},
        {"id": 4, "date": "2025-02-14", "type": "EXPENSE", "category": "Gifts", "amount": "40.00", "description": "Flowers"},
        {"id": 3, "date": "2025-02-01", "type": "INCOME", "category": "Salary", "amount": "2000.00", "description": ""},
        {"id": 2, "date": "2025-01-20", "type": "EXPENSE", "category": "dining", "amount": "12.50", "description": "Lunch with Sam"},
        {"id": 1, "date": "not-a-date", "type": "EXPENSE", "category": "Misc", "amount": "3.00", "description": None},
    ]


def ids(records):
    return [r["id"] for r in records]


class TestTransactionFilter:
    """Test the filter record itself."""

    def test_defaults_select_everything(self):
        """Default filter should be empty."""
        assert TransactionFilter().is_empty

    def test_normalizes_type_and_month(self):
        """Lowercase type, 'all' and single-digit months are normalized."""
        criteria = TransactionFilter(month="3", type="income")
        assert criteria.month == "03"
        assert criteria.type == "INCOME"
        assert TransactionFilter(month="all").month == "ALL"

    @pytest.mark.parametrize("field,value", [("month", "13"), ("month", "March"), ("type", "TRANSFER")])
    def test_rejects_unknown_values(self, field, value):
        """Values outside the allowed sets are rejected."""
        with pytest.raises(ValidationError):
            TransactionFilter(**{field: value})


class TestFilterTransactions:
    """Test filter predicates."""

    def test_empty_filter_is_identity(self, ledger):
        """All-ALL filter with empty search returns the input unchanged."""
        assert filter_transactions(ledger, TransactionFilter()) == ledger

    def test_empty_input(self):
        """Empty input yields empty output."""
        assert filter_transactions([], TransactionFilter(month="01", search="x")) == []

    def test_month(self, ledger):
        """Only transactions in the selected month match; bad dates never do."""
        assert ids(filter_transactions(ledger, TransactionFilter(month="02"))) == [4, 3]
        assert ids(filter_transactions(ledger, TransactionFilter(month="01"))) == [2]

    def test_unparsable_date_passes_all_months(self, ledger):
        """A bad date is kept when month is ALL."""
        result = filter_transactions(ledger, TransactionFilter(type="EXPENSE"))
        assert 1 in ids(result)

    def test_type(self, ledger):
        """Type filter keeps only matching type."""
        assert ids(filter_transactions(ledger, TransactionFilter(type="INCOME"))) == [3]

    def test_category_is_case_sensitive(self, ledger):
        """Category match is exact."""
        assert ids(filter_transactions(ledger, TransactionFilter(category="Dining"))) == [5]

    def test_search_is_case_insensitive_on_description_and_category(self, ledger):
        """Search matches description or category ignoring case."""
        assert ids(filter_transactions(ledger, TransactionFilter(search="DINING"))) == [5, 2]
        assert ids(filter_transactions(ledger, TransactionFilter(search="flow"))) == [4]

    def test_search_tolerates_missing_description(self, ledger):
        """A null description does not break search."""
        assert ids(filter_transactions(ledger, TransactionFilter(search="misc"))) == [1]

    def test_predicates_are_combined(self, ledger):
        """All active predicates must hold."""
        criteria = TransactionFilter(month="02", type="EXPENSE", search="flowers")
        assert ids(filter_transactions(ledger, criteria)) == [4]

        criteria = TransactionFilter(month="01", type="INCOME")
        assert filter_transactions(ledger, criteria) == []

    def test_idempotent(self, ledger):
        """Filtering twice gives the same result as filtering once."""
        criteria = TransactionFilter(type="EXPENSE", search="i")
        once = filter_transactions(ledger, criteria)
        assert filter_transactions(once, criteria) == once

    def test_does_not_mutate_input(self, ledger):
        """Input list is left untouched."""
        before = list(ledger)
        filter_transactions(ledger, TransactionFilter(month="02"))
        assert ledger == before


def test_distinct_categories_first_seen_order(ledger):
    """Categories keep first-seen order."""
    assert distinct_categories(ledger) == ["Dining", "Gifts", "Salary", "dining", "Misc"]
