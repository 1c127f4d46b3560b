"""What-if scenario simulation"""

from finsight.domain.models import FinancialMetrics, ScenarioChange, ScenarioType, SimulationResult
from finsight.domain.thresholds import FIVE_YEAR_GROWTH_FACTOR, FIVE_YEAR_YEARS
from finsight.utils.number_utils import plain_number


def _savings_rate(income: float, expenses: float) -> float:
    return ((income - expenses) / income) * 100 if income > 0 else 0


def describe_scenario(change: ScenarioChange) -> str:
    """Label like 'INCREASE SAVINGS by ₹5000/month' (only the first underscore becomes a space)"""
    return f"{change.type.value.replace('_', ' ', 1)} by ₹{plain_number(change.amount)}/month"


def simulate_scenario(metrics: FinancialMetrics, change: ScenarioChange) -> SimulationResult:
    """
    Estimate the effect of one monthly change.

    - annual impact = amount * 12
    - five-year impact = annual impact * 5 * 1.5, a flat multiplier standing
      in for investment growth; the UI relies on this exact figure
    - new savings rate recomputed against monthly income (income + amount
      for INCREASE_INCOME), 0 when that income is not positive
    """
    income = metrics.total_income
    expenses = metrics.total_expenses
    annual_impact = change.amount * 12

    if change.type is ScenarioType.INCREASE_INCOME:
        new_savings_rate = _savings_rate(income + change.amount, expenses)
    else:
        # INCREASE_SAVINGS and REDUCE_EXPENSE both free up `amount` per month
        new_savings_rate = _savings_rate(income, expenses - change.amount)

    five_year_impact = annual_impact * FIVE_YEAR_YEARS * FIVE_YEAR_GROWTH_FACTOR

    return SimulationResult(
        scenario=describe_scenario(change),
        annual_impact=annual_impact,
        five_year_impact=five_year_impact,
        net_worth_change=five_year_impact,
        new_savings_rate=new_savings_rate,
    )
