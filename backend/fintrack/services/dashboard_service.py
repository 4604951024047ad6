"""Dashboard assembly from a ledger snapshot."""

from fintrack.schemas.filters import TransactionFilter
from fintrack.schemas.summary import DashboardResponse
from fintrack.services import aggregation
from fintrack.services.filtering import filter_transactions
from fintrack.services.ledger_store import LedgerSnapshot


def build_dashboard(snapshot: LedgerSnapshot, criteria: TransactionFilter) -> DashboardResponse:
    """
    Filtered totals and breakdowns, plus budget usage and insights.

    Budget usage and insights always cover the current calendar month of the
    whole ledger; the filter only narrows the totals and breakdowns.
    """
    filtered = filter_transactions(snapshot.transactions, criteria)

    this_month = aggregation.transactions_in_month(snapshot.transactions, snapshot.current_month)
    month_expenses = aggregation.compute_totals(this_month).total_expenses
    usage = aggregation.budget_usage(snapshot.monthly_budget, month_expenses, snapshot.current_month)

    return DashboardResponse(
        filter=criteria,
        transaction_count=len(filtered),
        overview=aggregation.compute_totals(filtered),
        expense_breakdown=aggregation.expense_breakdown(filtered),
        monthly_breakdown=aggregation.monthly_breakdown(filtered),
        budget=usage,
        insights=aggregation.generate_insights(usage, this_month),
    )
