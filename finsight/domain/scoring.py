"""FinSight scoring engine - step-table scores and the weighted composite"""

import math
from typing import Tuple

from finsight.domain.models import FinancialMetrics, FinSightScore, FinSightStatus

# (threshold, score) pairs, checked in order; first match wins
SAVINGS_RATE_TABLE: Tuple[Tuple[float, int], ...] = ((30, 100), (25, 90), (20, 80), (15, 65), (10, 50), (5, 35), (0, 20))
BUDGET_TABLE: Tuple[Tuple[float, int], ...] = ((95, 100), (85, 85), (75, 70), (60, 55), (50, 40))
DEBT_TABLE: Tuple[Tuple[float, int], ...] = ((10, 100), (20, 85), (30, 70), (40, 55), (50, 40))
EXPENSE_TREND_TABLE: Tuple[Tuple[float, int], ...] = ((-10, 100), (-5, 90), (0, 80), (5, 65), (10, 50), (20, 35))

SAVINGS_RATE_FLOOR = 0
BUDGET_FLOOR = 25
DEBT_FLOOR = 20
EXPENSE_TREND_FLOOR = 20

SAVINGS_WEIGHT = 0.4
BUDGET_WEIGHT = 0.2
DEBT_WEIGHT = 0.2
EXPENSE_TREND_WEIGHT = 0.2

# (minimum total, status), checked in order
STATUS_BANDS: Tuple[Tuple[int, FinSightStatus], ...] = (
    (80, FinSightStatus.EXCELLENT),
    (60, FinSightStatus.STABLE),
    (40, FinSightStatus.RISKY),
)


def _at_least(value: float, table: Tuple[Tuple[float, int], ...], floor: int) -> int:
    for threshold, score in table:
        if value >= threshold:
            return score
    return floor


def _at_most(value: float, table: Tuple[Tuple[float, int], ...], floor: int) -> int:
    for threshold, score in table:
        if value <= threshold:
            return score
    return floor


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_savings_rate_score(savings_rate: float) -> int:
    """
    Score a savings rate (%). 30%+ earns full marks, negative savings earn 0.

    Precondition: savings_rate is a finite number.
    """
    return _at_least(savings_rate, SAVINGS_RATE_TABLE, SAVINGS_RATE_FLOOR)


def calculate_budget_score(budget_adherence: float) -> int:
    """Score budget adherence (% of categories within budget). Input must be finite."""
    return _at_least(budget_adherence, BUDGET_TABLE, BUDGET_FLOOR)


def calculate_debt_score(debt_to_income_ratio: float) -> int:
    """Lower debt ratio = higher score. Input must be finite."""
    return _at_most(debt_to_income_ratio, DEBT_TABLE, DEBT_FLOOR)


def calculate_expense_trend_score(expense_growth_rate: float) -> int:
    """Shrinking expenses score higher. Input must be finite."""
    return _at_most(expense_growth_rate, EXPENSE_TREND_TABLE, EXPENSE_TREND_FLOOR)


def determine_status(total: int) -> FinSightStatus:
    """
    Map composite total to a status bucket.

    Bands:
    - 80+:   EXCELLENT
    - 60-79: STABLE
    - 40-59: RISKY
    - <40:   CRITICAL
    """
    for minimum, status in STATUS_BANDS:
        if total >= minimum:
            return status
    return FinSightStatus.CRITICAL


def calculate_finsight_score(metrics: FinancialMetrics) -> FinSightScore:
    """
    Calculate the composite 0-100 FinSight score.

    Scoring weights:
    - 40%: Savings rate (strongest single predictor of financial health)
    - 20%: Budget adherence
    - 20%: Debt-to-income ratio
    - 20%: Expense trend

    Sub-scores are returned alongside the total for transparency.
    """
    savings_rate_score = calculate_savings_rate_score(metrics.savings_rate)
    budget_score = calculate_budget_score(metrics.budget_adherence)
    debt_score = calculate_debt_score(metrics.debt_to_income_ratio)
    expense_trend_score = calculate_expense_trend_score(metrics.expense_growth_rate)

    total = _round_half_up(
        savings_rate_score * SAVINGS_WEIGHT
        + budget_score * BUDGET_WEIGHT
        + debt_score * DEBT_WEIGHT
        + expense_trend_score * EXPENSE_TREND_WEIGHT
    )
    status = determine_status(total)

    return FinSightScore(
        total=total,
        savings_rate_score=savings_rate_score,
        budget_score=budget_score,
        debt_score=debt_score,
        expense_trend_score=expense_trend_score,
        status=status,
        status_color=status.color,
    )
