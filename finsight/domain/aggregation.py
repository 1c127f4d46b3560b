"""Pre-aggregation of raw records into the engine's metric inputs"""

from typing import Dict, List, Sequence, Tuple

from finsight.domain.models import (
    Account,
    CategorySpending,
    Debt,
    FinancialMetrics,
    FinancialSnapshot,
    IncomeSource,
    NetWorthSnapshot,
    Transaction,
)
from finsight.domain.thresholds import (
    CASH_ACCOUNT_KEYWORDS,
    DISCRETIONARY_CATEGORIES,
    EMERGENCY_ACCOUNT_KEYWORDS,
    EXCLUDED_EXPENSE_CATEGORIES,
    LIABILITY_SETTLEMENT_TYPES,
    RECURRING_CATEGORIES,
)
from finsight.utils.date_utils import as_date, month_start, shift_month

# Monthly multiplier per income frequency; anything else counts once
INCOME_FREQUENCY_FACTORS: Dict[str, float] = {
    "MONTHLY": 1,
    "YEARLY": 1 / 12,
    "WEEKLY": 4,
}

BANK_ACCOUNT_TYPE = "DEBIT"


def _category_matches(category: str, keywords: Sequence[str]) -> bool:
    lowered = category.lower()
    return any(keyword.lower() in lowered for keyword in keywords)


def is_liability_settlement(txn: Transaction) -> bool:
    """Credit card bill payments move money between accounts; they are neither income nor expense"""
    return txn.effective_type in LIABILITY_SETTLEMENT_TYPES or txn.category in EXCLUDED_EXPENSE_CATEGORIES


def split_by_month(snapshot: FinancialSnapshot) -> Tuple[List[Transaction], List[Transaction]]:
    """Return (this month, last month) transactions relative to snapshot.as_of"""
    this_start = month_start(snapshot.as_of)
    last_start = shift_month(snapshot.as_of, -1)

    this_month: List[Transaction] = []
    last_month: List[Transaction] = []
    for txn in snapshot.transactions:
        day = as_date(txn.date)
        if day >= this_start:
            this_month.append(txn)
        elif day >= last_start:
            last_month.append(txn)
    return this_month, last_month


def expense_transactions(transactions: Sequence[Transaction]) -> List[Transaction]:
    return [t for t in transactions if t.is_debit and not is_liability_settlement(t)]


def income_transactions(transactions: Sequence[Transaction]) -> List[Transaction]:
    return [t for t in transactions if t.is_credit and not is_liability_settlement(t)]


def monthly_income_from_sources(income_sources: Sequence[IncomeSource]) -> float:
    return sum(
        s.amount * INCOME_FREQUENCY_FACTORS.get(s.frequency, 1)
        for s in income_sources
        if s.is_active
    )


def total_assets(accounts: Sequence[Account]) -> float:
    return sum(a.balance for a in accounts if a.type == BANK_ACCOUNT_TYPE)


def named_bank_balance(accounts: Sequence[Account], keywords: Sequence[str]) -> float:
    """Sum of bank balances whose account name contains any keyword"""
    return sum(a.balance for a in accounts if a.type == BANK_ACCOUNT_TYPE and _category_matches(a.name, keywords))


def cash_assets(accounts: Sequence[Account]) -> float:
    return named_bank_balance(accounts, CASH_ACCOUNT_KEYWORDS)


def total_debts(debts: Sequence[Debt]) -> float:
    return sum(d.remaining_amount for d in debts)


def net_worth_history(snapshots: Sequence[NetWorthSnapshot], limit: int = 6) -> List[NetWorthSnapshot]:
    """Most recent `limit` snapshots, newest first"""
    return sorted(snapshots, key=lambda s: (s.year, s.month), reverse=True)[:limit]


def net_worth_growth(snapshots: Sequence[NetWorthSnapshot]) -> float:
    """Growth (%) between the two latest snapshots, relative to the previous one"""
    history = net_worth_history(snapshots, limit=2)
    if len(history) < 2:
        return 0
    latest, previous = history
    return (latest.net_worth - previous.net_worth) / abs(previous.net_worth or 1) * 100


def category_totals(transactions: Sequence[Transaction]) -> Dict[str, float]:
    totals: Dict[str, float] = {}
    for t in expense_transactions(transactions):
        totals[t.category] = totals.get(t.category, 0) + t.amount
    return totals


def build_financial_metrics(
    snapshot: FinancialSnapshot,
    default_monthly_income: float,
    default_monthly_expenses: float,
) -> FinancialMetrics:
    """
    Aggregate one user's records into the period metrics.

    Income comes from active income sources, then this month's credits,
    then `default_monthly_income`. The emergency fund is measured against
    this month's expenses, or `default_monthly_expenses` when there are none.
    Every ratio with a zero denominator is 0.
    """
    this_month, last_month = split_by_month(snapshot)
    this_expenses = expense_transactions(this_month)

    this_month_income = sum(t.amount for t in income_transactions(this_month))
    expenses = sum(t.amount for t in this_expenses)
    last_month_expenses = sum(t.amount for t in expense_transactions(last_month))

    monthly_income = (
        monthly_income_from_sources(snapshot.income_sources) or this_month_income or default_monthly_income
    )

    assets = total_assets(snapshot.accounts)
    debts = total_debts(snapshot.debts)

    savings_rate = ((monthly_income - expenses) / monthly_income) * 100 if monthly_income > 0 else 0
    debt_to_income = (debts / (monthly_income * 12)) * 100 if monthly_income > 0 else 0

    # Share of budgets not exceeded; no budgets at all counts as 0%
    totals = category_totals(this_month)
    within_budget = sum(1 for b in snapshot.budgets if totals.get(b.category, 0) <= b.amount)
    budget_adherence = within_budget / (len(snapshot.budgets) or 1) * 100

    expense_growth = (
        ((expenses - last_month_expenses) / last_month_expenses) * 100 if last_month_expenses > 0 else 0
    )

    discretionary = sum(t.amount for t in this_expenses if _category_matches(t.category, DISCRETIONARY_CATEGORIES))
    discretionary_ratio = (discretionary / expenses) * 100 if expenses > 0 else 0

    recurring = sum(t.amount for t in this_expenses if _category_matches(t.category, RECURRING_CATEGORIES))

    emergency_fund = named_bank_balance(snapshot.accounts, EMERGENCY_ACCOUNT_KEYWORDS)
    expense_base = expenses or default_monthly_expenses
    emergency_fund_months = emergency_fund / expense_base if expense_base > 0 else 0

    return FinancialMetrics(
        total_income=monthly_income,
        total_expenses=expenses,
        savings_rate=savings_rate,
        debt_to_income_ratio=debt_to_income,
        net_worth=assets - debts,
        net_worth_growth=net_worth_growth(snapshot.net_worth_snapshots),
        budget_adherence=budget_adherence,
        expense_growth_rate=expense_growth,
        discretionary_ratio=discretionary_ratio,
        recurring_expenses=recurring,
        emergency_fund_months=emergency_fund_months,
    )


def build_category_spending(snapshot: FinancialSnapshot) -> List[CategorySpending]:
    """Per-category spend this month with share of total, trend vs last month and budget status"""
    this_month, last_month = split_by_month(snapshot)
    totals = category_totals(this_month)
    previous = category_totals(last_month)
    expenses = sum(totals.values())
    budgets: Dict[str, float] = {}
    for b in snapshot.budgets:
        budgets.setdefault(b.category, b.amount)

    spending: List[CategorySpending] = []
    for category, amount in totals.items():
        prior = previous.get(category, 0)
        budget = budgets.get(category)
        spending.append(
            CategorySpending(
                category=category,
                amount=amount,
                percentage=(amount / expenses) * 100 if expenses > 0 else 0,
                trend=((amount - prior) / prior) * 100 if prior > 0 else 0,
                budget=budget,
                over_budget=budget is not None and amount > budget,
            )
        )
    return spending
