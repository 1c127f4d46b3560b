"""Unit tests for value type validation"""

import math
import pytest
from dataclasses import FrozenInstanceError
from datetime import date
from finsight.domain.exceptions import DomainException, InvalidInputError
from finsight.domain.models import CategorySpending, FinSightStatus, Transaction


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_metrics_reject_non_finite(make_metrics, bad):
    """Test NaN/Infinity is rejected at construction rather than scored"""
    with pytest.raises(InvalidInputError, match="savings_rate"):
        make_metrics(savings_rate=bad)


def test_metrics_allow_out_of_range_percentages(make_metrics):
    """Test ratios are not clamped: >100 and negative values are legal"""
    metrics = make_metrics(savings_rate=-35, debt_to_income_ratio=250)
    assert metrics.savings_rate == -35
    assert metrics.debt_to_income_ratio == 250


def test_metrics_are_immutable(make_metrics):
    metrics = make_metrics()
    with pytest.raises(FrozenInstanceError):
        metrics.savings_rate = 50


def test_category_spending_rejects_non_finite_budget():
    with pytest.raises(InvalidInputError):
        CategorySpending(category="Food", amount=100, percentage=10, trend=0, budget=math.inf)


def test_transaction_rejects_nan_amount():
    with pytest.raises(DomainException):
        Transaction(amount=math.nan, category="Food", date=date(2026, 10, 1))


def test_status_colors():
    assert FinSightStatus.EXCELLENT.color == "#10B981"
    assert FinSightStatus.STABLE.color == "#3B82F6"
    assert FinSightStatus.RISKY.color == "#F59E0B"
    assert FinSightStatus.CRITICAL.color == "#EF4444"
