"""Pytest fixtures for testing"""

import pytest
from datetime import date, timedelta
from typing import Callable
from finsight.domain.models import (
    Account,
    Budget,
    CategorySpending,
    Debt,
    FinancialMetrics,
    FinancialSnapshot,
    IncomeSource,
    NetWorthSnapshot,
    Transaction,
)


AS_OF = date(2026, 10, 19)  # a Monday


@pytest.fixture
def make_metrics() -> Callable[..., FinancialMetrics]:
    """Factory for metrics that sit in the neutral zone of every rule unless overridden"""

    def _make(**overrides) -> FinancialMetrics:
        values = dict(
            total_income=100_000,
            total_expenses=78_000,
            savings_rate=22,
            debt_to_income_ratio=20,
            net_worth=500_000,
            net_worth_growth=3,
            budget_adherence=75,
            expense_growth_rate=5,
            discretionary_ratio=25,
            recurring_expenses=20_000,
            emergency_fund_months=4,
        )
        values.update(overrides)
        return FinancialMetrics(**values)

    return _make


@pytest.fixture
def healthy_metrics(make_metrics) -> FinancialMetrics:
    """Saver with low debt, shrinking expenses and a full emergency fund"""
    return make_metrics(
        savings_rate=32,
        debt_to_income_ratio=8,
        net_worth_growth=7,
        budget_adherence=96,
        expense_growth_rate=-12,
        discretionary_ratio=20,
        emergency_fund_months=7,
    )


@pytest.fixture
def struggling_metrics(make_metrics) -> FinancialMetrics:
    """Overspender with heavy debt and no cushion"""
    return make_metrics(
        total_income=50_000,
        total_expenses=47_500,
        savings_rate=5,
        debt_to_income_ratio=45,
        net_worth_growth=1,
        budget_adherence=40,
        expense_growth_rate=18,
        discretionary_ratio=45,
        emergency_fund_months=1,
    )


@pytest.fixture
def over_budget_spending() -> list[CategorySpending]:
    return [
        CategorySpending(category="Shopping", amount=15_000, percentage=30, trend=20, budget=10_000, over_budget=True),
        CategorySpending(category="Dining", amount=9_000, percentage=18, trend=5, budget=5_000, over_budget=True),
        CategorySpending(category="Groceries", amount=8_000, percentage=16, trend=-3, budget=10_000, over_budget=False),
    ]


@pytest.fixture
def sample_snapshot() -> FinancialSnapshot:
    """Two months of activity for a salaried user with a savings account and a car loan"""
    this_month = date(2026, 10, 1)
    last_month = date(2026, 9, 1)

    transactions = [
        # Salary
        Transaction(amount=100_000, category="Salary", date=this_month, type="CREDIT"),
        Transaction(amount=100_000, category="Salary", date=last_month, type="CREDIT"),
        # Spending this month: 60,000
        Transaction(amount=25_000, category="Rent", date=this_month + timedelta(days=1)),
        Transaction(amount=15_000, category="Shopping", date=this_month + timedelta(days=3), merchant="Myntra"),
        Transaction(amount=12_000, category="Groceries", date=this_month + timedelta(days=5)),
        Transaction(amount=8_000, category="Food & Dining", date=this_month + timedelta(days=10), merchant="Swiggy"),
        # Credit card bill payment is a liability settlement, not spending
        Transaction(
            amount=20_000,
            category="Bill Payment",
            date=this_month + timedelta(days=12),
            transaction_type="CREDIT_CARD_PAYMENT",
        ),
        # Spending last month: 50,000
        Transaction(amount=25_000, category="Rent", date=last_month + timedelta(days=1)),
        Transaction(amount=10_000, category="Shopping", date=last_month + timedelta(days=3)),
        Transaction(amount=15_000, category="Groceries", date=last_month + timedelta(days=5)),
    ]

    return FinancialSnapshot(
        as_of=AS_OF,
        transactions=transactions,
        accounts=[
            Account(name="HDFC Savings", type="DEBIT", balance=300_000),
            Account(name="Salary Account", type="DEBIT", balance=100_000),
            Account(name="Amex", type="CREDIT_CARD", balance=-12_000),
        ],
        budgets=[
            Budget(category="Shopping", amount=10_000),
            Budget(category="Groceries", amount=15_000),
        ],
        income_sources=[IncomeSource(name="Employer", amount=100_000, frequency="MONTHLY")],
        debts=[Debt(name="Car loan", remaining_amount=240_000)],
        net_worth_snapshots=[
            NetWorthSnapshot(year=2026, month=8, net_worth=140_000),
            NetWorthSnapshot(year=2026, month=10, net_worth=160_000),
            NetWorthSnapshot(year=2026, month=9, net_worth=150_000),
        ],
    )
