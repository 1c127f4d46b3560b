"""Financial freedom projection - months until savings reach a target"""

import math
from typing import List, Sequence

from finsight.domain.exceptions import InvalidInputError
from finsight.domain.models import FreedomProjection
from finsight.domain.thresholds import (
    DEFAULT_ANNUAL_RETURN_RATE,
    FALLBACK_PAYOFF_MONTHS,
    FREEDOM_TARGETS,
    MAX_PROJECTION_MONTHS,
)


def calculate_freedom_projection(
    current_savings: float,
    monthly_savings: float,
    target_amount: float,
    annual_return_rate: float = DEFAULT_ANNUAL_RETURN_RATE,
    max_months: int = MAX_PROJECTION_MONTHS,
) -> FreedomProjection:
    """
    Step the balance forward one month at a time until it reaches the target.

    Each month: balance = balance * (1 + annual_rate / 12) + monthly_savings.
    The monthly rate is a plain division by 12, not an equivalent compound rate.
    The loop stops at `max_months`; hitting the cap means not on track, and the
    required monthly savings is then the remaining gap spread over 120 months.

    Raises:
        InvalidInputError: If any amount or the rate is not a finite number
    """
    for name, value in (
        ("current_savings", current_savings),
        ("monthly_savings", monthly_savings),
        ("target_amount", target_amount),
        ("annual_return_rate", annual_return_rate),
    ):
        if not math.isfinite(value):
            raise InvalidInputError(f"{name} must be a finite number, got {value!r}")

    monthly_rate = annual_return_rate / 12

    months = 0
    balance = current_savings
    while balance < target_amount and months < max_months:
        balance = balance * (1 + monthly_rate) + monthly_savings
        months += 1

    on_track = months < max_months
    required_monthly_savings = monthly_savings if on_track else (target_amount - current_savings) / FALLBACK_PAYOFF_MONTHS

    return FreedomProjection(
        target_amount=target_amount,
        years_to_reach=months // 12,
        months_to_reach=months,
        required_monthly_savings=required_monthly_savings,
        current_monthly_savings=monthly_savings,
        on_track=on_track,
    )


def calculate_multiple_freedom_targets(
    current_savings: float,
    monthly_savings: float,
    targets: Sequence[float] = FREEDOM_TARGETS,
    annual_return_rate: float = DEFAULT_ANNUAL_RETURN_RATE,
    max_months: int = MAX_PROJECTION_MONTHS,
) -> List[FreedomProjection]:
    """Project the standard milestones: 10L, 50L, 1Cr, 2.5Cr"""
    return [
        calculate_freedom_projection(current_savings, monthly_savings, target, annual_return_rate, max_months)
        for target in targets
    ]
