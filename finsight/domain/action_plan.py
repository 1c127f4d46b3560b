"""30/60/90-day action plan generation"""

from typing import List, Optional

from finsight.domain.models import (
    ActionHorizon,
    ActionPlanItem,
    CategorySpending,
    FinancialDiagnosis,
    FinancialMetrics,
)
from finsight.domain.thresholds import DEFAULT_ACTION_PLAN_THRESHOLDS, ActionPlanThresholds
from finsight.utils.number_utils import to_fixed


def find_highest_over_budget(category_spending: List[CategorySpending]) -> Optional[CategorySpending]:
    """Category with the largest absolute overage, or None when nothing is over a set budget"""
    over = [c for c in category_spending if c.over_budget and c.budget]
    if not over:
        return None
    return max(over, key=lambda c: c.amount - (c.budget or 0))


def generate_action_plan(
    metrics: FinancialMetrics,
    diagnosis: FinancialDiagnosis,
    category_spending: List[CategorySpending],
    thresholds: ActionPlanThresholds = DEFAULT_ACTION_PLAN_THRESHOLDS,
) -> List[ActionPlanItem]:
    """
    Build the 30/60/90-day plan.

    Items are gated on the current metrics, except the SIP, target savings rate
    and diversification items which are standing goals and always present.
    Priority within a horizon follows emission order (1 = most urgent).

    The diagnosis is accepted so callers can pass a full analysis through; the
    current rules read only the metrics and category spending.
    """
    t = thresholds
    plans: List[ActionPlanItem] = []

    # 30-day: immediate
    if metrics.savings_rate < t.savings_target:
        target_increase = min(t.max_savings_step, t.savings_target - metrics.savings_rate)
        plans.append(
            ActionPlanItem(
                title="Increase Savings Rate",
                description=f"Boost savings rate by {to_fixed(target_increase)}% through expense cuts",
                category=ActionHorizon.THIRTY_DAY,
                priority=1,
                target_value=metrics.savings_rate + target_increase,
            )
        )

    worst = find_highest_over_budget(category_spending)
    if worst is not None:
        overage = worst.amount - (worst.budget or 0)
        plans.append(
            ActionPlanItem(
                title=f"Reduce {worst.category} Spending",
                description=f"Cut {worst.category} expenses by ₹{to_fixed(overage * 0.5)}",
                category=ActionHorizon.THIRTY_DAY,
                priority=2,
                target_value=worst.budget,
            )
        )

    if metrics.emergency_fund_months < t.emergency_fund_min_months:
        plans.append(
            ActionPlanItem(
                title="Build Emergency Fund",
                description="Add ₹10,000 to emergency savings this month",
                category=ActionHorizon.THIRTY_DAY,
                priority=3,
                target_value=t.emergency_fund_monthly_top_up,
            )
        )

    # 60-day: short-term
    if metrics.debt_to_income_ratio > t.debt_payoff_ratio:
        plans.append(
            ActionPlanItem(
                title="Accelerate Debt Payoff",
                description="Pay extra ₹5,000 toward highest-interest debt",
                category=ActionHorizon.SIXTY_DAY,
                priority=1,
                target_value=t.extra_debt_payment,
            )
        )

    plans.append(
        ActionPlanItem(
            title="Start/Increase SIP",
            description="Begin or increase systematic investment by ₹2,000/month",
            category=ActionHorizon.SIXTY_DAY,
            priority=2,
            target_value=t.sip_increase,
        )
    )

    if metrics.discretionary_ratio > t.discretionary_high:
        plans.append(
            ActionPlanItem(
                title="Reduce Discretionary Spending",
                description=(
                    f"Cut discretionary expenses to below {to_fixed(t.discretionary_target)}% "
                    f"(currently {to_fixed(metrics.discretionary_ratio)}%)"
                ),
                category=ActionHorizon.SIXTY_DAY,
                priority=3,
                target_value=t.discretionary_target,
            )
        )

    # 90-day: medium-term
    plans.append(
        ActionPlanItem(
            title="Achieve Target Savings Rate",
            description=f"Reach {to_fixed(t.long_term_savings_target)}% savings rate through sustained discipline",
            category=ActionHorizon.NINETY_DAY,
            priority=1,
            target_value=t.long_term_savings_target,
        )
    )

    if metrics.emergency_fund_months < t.emergency_fund_target_months:
        plans.append(
            ActionPlanItem(
                title="Complete Emergency Fund",
                description="Build emergency fund to cover 6 months of expenses",
                category=ActionHorizon.NINETY_DAY,
                priority=2,
                target_value=t.emergency_fund_target_months,
            )
        )

    plans.append(
        ActionPlanItem(
            title="Diversify Investments",
            description="Allocate investments: 50% equity, 30% debt, 20% emergency",
            category=ActionHorizon.NINETY_DAY,
            priority=3,
        )
    )

    return plans
