"""
Aggregation engine.

Pure functions deriving dashboard summaries from a (possibly filtered)
transaction collection. Sums are accumulated as Decimal and quantised to
cents; divisions by zero resolve to 0 or None instead of raising.
"""

from collections import defaultdict
from datetime import date
from decimal import ROUND_DOWN, Decimal
from typing import Any, Dict, Iterable, List, Optional, Tuple

from fintrack.config import settings
from fintrack.models.transaction import TransactionType
from fintrack.schemas.summary import (
    BudgetStatus,
    BudgetUsage,
    CategoryBreakdown,
    CategorySummary,
    MetricChange,
    MonthComparison,
    MonthlyBreakdown,
    MonthTotals,
    Overview,
)
from fintrack.services.records import (
    CENT,
    ZERO,
    month_key,
    record_amount,
    record_category,
    record_date,
    record_type,
    to_money,
)

INCOME = TransactionType.INCOME.value
EXPENSE = TransactionType.EXPENSE.value

CLOSE_TO_LIMIT_PERCENT = Decimal("80")
OVER_BUDGET_PERCENT = Decimal("100")
HUNDRED = Decimal("100")


def compute_totals(transactions: Iterable[Any]) -> Overview:
    income = expenses = ZERO
    income_count = expense_count = 0
    for t in transactions:
        kind = record_type(t)
        if kind == INCOME:
            income += record_amount(t)
            income_count += 1
        elif kind == EXPENSE:
            expenses += record_amount(t)
            expense_count += 1

    total_income = to_money(income)
    total_expenses = to_money(expenses)
    return Overview(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=total_income - total_expenses,
        income_count=income_count,
        expense_count=expense_count,
    )


def expense_totals_by_category(transactions: Iterable[Any]) -> Dict[str, Decimal]:
    """Summed expense per category, keyed in first-seen order."""
    totals: Dict[str, Decimal] = {}
    for t in transactions:
        if record_type(t) != EXPENSE:
            continue
        category = record_category(t)
        totals[category] = totals.get(category, ZERO) + record_amount(t)
    return totals


def expense_breakdown(transactions: Iterable[Any]) -> CategoryBreakdown:
    totals = expense_totals_by_category(transactions)
    return CategoryBreakdown(
        categories=list(totals),
        totals=[to_money(v) for v in totals.values()],
    )


def summarize_by_category(transactions: Iterable[Any]) -> List[CategorySummary]:
    """Income, expenses and net per category (all types), ordered by category."""
    income: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    expenses: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    for t in transactions:
        category = record_category(t)
        kind = record_type(t)
        # Touch both maps so categories with only one type still appear
        income[category] += record_amount(t) if kind == INCOME else ZERO
        expenses[category] += record_amount(t) if kind == EXPENSE else ZERO

    return [
        CategorySummary(
            category=category,
            total_income=to_money(income[category]),
            total_expenses=to_money(expenses[category]),
            net=to_money(income[category] - expenses[category]),
        )
        for category in sorted(income)
    ]


def monthly_breakdown(transactions: Iterable[Any]) -> MonthlyBreakdown:
    """
    Group by calendar month of the transaction date.

    Records without a parsable date are left out. Buckets are returned in
    chronological order, labelled like "Jan 2025".
    """
    buckets: Dict[Tuple[int, int], List[Decimal]] = {}
    for t in transactions:
        d = record_date(t)
        if d is None:
            continue
        bucket = buckets.setdefault((d.year, d.month), [ZERO, ZERO])
        kind = record_type(t)
        if kind == INCOME:
            bucket[0] += record_amount(t)
        elif kind == EXPENSE:
            bucket[1] += record_amount(t)

    ordered = sorted(buckets)
    return MonthlyBreakdown(
        months=[date(y, m, 1).strftime("%b %Y") for y, m in ordered],
        month_keys=[f"{y:04d}-{m:02d}" for y, m in ordered],
        income_by_month=[to_money(buckets[key][0]) for key in ordered],
        expenses_by_month=[to_money(buckets[key][1]) for key in ordered],
    )


def transactions_in_month(transactions: Iterable[Any], month: str) -> List[Any]:
    """Records whose date falls in the ``YYYY-MM`` month."""
    result = []
    for t in transactions:
        d = record_date(t)
        if d is not None and month_key(d) == month:
            result.append(t)
    return result


def month_totals(transactions: Iterable[Any], month: str) -> MonthTotals:
    overview = compute_totals(transactions_in_month(transactions, month))
    return MonthTotals(
        month=month,
        income=overview.total_income,
        expenses=overview.total_expenses,
    )


def percent_change(current: Decimal, previous: Decimal) -> Optional[float]:
    if previous <= 0:
        return None
    return round(float((current - previous) / previous * HUNDRED), 2)


def _metric_change(current: Decimal, previous: Decimal) -> MetricChange:
    return MetricChange(
        current=to_money(current),
        previous=to_money(previous),
        delta=to_money(current - previous),
        delta_percent=percent_change(current, previous),
    )


def compare_months(current: MonthTotals, previous: MonthTotals) -> MonthComparison:
    return MonthComparison(
        current_month=current.month,
        previous_month=previous.month,
        income=_metric_change(current.income, previous.income),
        expenses=_metric_change(current.expenses, previous.expenses),
    )


def classify_usage(usage_percent: Decimal) -> BudgetStatus:
    if usage_percent >= OVER_BUDGET_PERCENT:
        return BudgetStatus.over_budget
    if usage_percent >= CLOSE_TO_LIMIT_PERCENT:
        return BudgetStatus.close_to_limit
    return BudgetStatus.on_track


def budget_usage(monthly_budget: Decimal, month_expenses: Decimal, month: str) -> BudgetUsage:
    """
    Compare one month's expenses against the monthly budget.

    The status is classified on the exact usage. ``usage_percent`` is
    truncated to two places so it never reads as a higher band than the
    status (99.999% is reported as 99.99, not 100.0).
    """
    if monthly_budget > 0:
        usage = month_expenses / monthly_budget * HUNDRED
    else:
        usage = ZERO

    return BudgetUsage(
        month=month,
        monthly_budget=to_money(monthly_budget),
        spent=to_money(month_expenses),
        remaining=to_money(monthly_budget - month_expenses),
        usage_percent=float(usage.quantize(CENT, rounding=ROUND_DOWN)),
        status=classify_usage(usage),
    )


def _budget_message(usage: BudgetUsage, currency: str) -> str:
    if usage.status == BudgetStatus.over_budget:
        return (
            f"Over budget: you have spent {currency}{-usage.remaining:.2f} more than "
            f"your {currency}{usage.monthly_budget:.2f} monthly budget."
        )
    if usage.status == BudgetStatus.close_to_limit:
        return (
            f"Close to limit: {int(usage.usage_percent)}% of your monthly budget is used, "
            f"{currency}{usage.remaining:.2f} left."
        )
    return (
        f"On track: {int(usage.usage_percent)}% of your monthly budget is used, "
        f"{currency}{usage.remaining:.2f} left."
    )


def top_expense_category(transactions: Iterable[Any]) -> Optional[Tuple[str, Decimal]]:
    """Highest-spending category; ties go to the first one encountered."""
    best = None
    for category, total in expense_totals_by_category(transactions).items():
        if best is None or total > best[1]:
            best = (category, total)
    return best


def generate_insights(
    usage: BudgetUsage,
    month_transactions: Iterable[Any],
    currency: Optional[str] = None,
) -> List[str]:
    """
    Human-readable observations for the current month.

    ``month_transactions`` must already be restricted to the month the budget
    usage was computed for.
    """
    currency = settings.currency_symbol if currency is None else currency
    insights = [_budget_message(usage, currency)]

    month_transactions = list(month_transactions)
    has_expenses = any(record_type(t) == EXPENSE for t in month_transactions)
    if not has_expenses:
        insights.append("No expenses recorded yet this month.")
        return insights

    category, total = top_expense_category(month_transactions)
    insights.append(
        f"Highest spending this month: {category} ({currency}{to_money(total):.2f})."
    )
    return insights
