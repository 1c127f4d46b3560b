"""Rule-based financial diagnosis and wealth-building advice"""

from typing import List

from finsight.domain.models import CategorySpending, FinancialDiagnosis, FinancialMetrics
from finsight.domain.thresholds import DEFAULT_DIAGNOSIS_THRESHOLDS, DiagnosisThresholds
from finsight.utils.number_utils import to_fixed


def generate_diagnosis(
    metrics: FinancialMetrics,
    category_spending: List[CategorySpending],
    thresholds: DiagnosisThresholds = DEFAULT_DIAGNOSIS_THRESHOLDS,
) -> FinancialDiagnosis:
    """
    Classify the period's metrics into weaknesses, strengths, alerts and recommendations.

    Every rule is evaluated independently; only the savings-rate and debt
    checks are cascading (first matching branch wins).
    """
    t = thresholds
    weaknesses: List[str] = []
    strengths: List[str] = []
    alerts: List[str] = []
    recommendations: List[str] = []

    # Savings rate
    savings = metrics.savings_rate
    if savings < t.savings_critical:
        weaknesses.append(f"Savings rate is critically low at {to_fixed(savings, 1)}%")
        alerts.append(f"Your savings rate is below {to_fixed(t.savings_critical)}%. This puts your financial security at risk.")
        recommendations.append(
            f"Aim to save at least {to_fixed(t.savings_target)}% of your income. Start by cutting discretionary spending."
        )
    elif savings < t.savings_target:
        weaknesses.append(f"Savings rate is {to_fixed(savings, 1)}%, below recommended {to_fixed(t.savings_target)}%")
        recommendations.append(f"Increase savings rate to {to_fixed(t.savings_target)}% by reducing non-essential expenses.")
    else:
        strengths.append(f"Strong savings rate of {to_fixed(savings, 1)}%")

    # Debt
    debt = metrics.debt_to_income_ratio
    if debt > t.debt_high:
        weaknesses.append(f"High debt-to-income ratio: {to_fixed(debt, 1)}%")
        alerts.append("Your debt burden is high. Focus on debt reduction before new expenses.")
        recommendations.append("Consider debt consolidation or the avalanche method to reduce high-interest debt first.")
    elif debt > t.debt_elevated:
        weaknesses.append(f"Debt-to-income ratio is elevated at {to_fixed(debt, 1)}%")
        recommendations.append(f"Work on reducing debt to below {to_fixed(t.debt_elevated)}% of income.")
    elif debt < t.debt_low:
        strengths.append("Low debt burden - good financial flexibility")

    # Expense growth
    growth = metrics.expense_growth_rate
    if growth > t.expense_growth_high:
        weaknesses.append(f"Expenses grew {to_fixed(growth, 1)}% - possible lifestyle inflation")
        alerts.append("Rapid expense growth detected. Review recent spending patterns.")
        recommendations.append("Identify and cut back on categories with highest growth.")
    elif growth < 0:
        strengths.append(f"Expenses decreased by {to_fixed(abs(growth), 1)}%")

    # Emergency fund
    emergency = metrics.emergency_fund_months
    if emergency < t.emergency_fund_min_months:
        weaknesses.append(f"Emergency fund covers only {to_fixed(emergency, 1)} months")
        alerts.append("Emergency fund is insufficient. Aim for 6 months of expenses.")
        recommendations.append("Prioritize building emergency fund to 6 months of expenses.")
    elif emergency >= t.emergency_fund_target_months:
        strengths.append(f"Strong emergency fund: {to_fixed(emergency, 1)} months coverage")

    # Net worth growth
    if metrics.net_worth_growth < t.net_worth_growth_stagnant:
        weaknesses.append("Net worth growth is stagnant")
        recommendations.append("Focus on both increasing income and reducing expenses to accelerate wealth building.")
    elif metrics.net_worth_growth > t.net_worth_growth_strong:
        strengths.append(f"Excellent net worth growth: {to_fixed(metrics.net_worth_growth, 1)}%")

    # Budget adherence
    if metrics.budget_adherence < t.budget_adherence_low:
        weaknesses.append(f"Budget discipline is low: {to_fixed(metrics.budget_adherence)}% adherence")
        recommendations.append("Review and adjust budgets to be more realistic, then stick to them.")
    elif metrics.budget_adherence > t.budget_adherence_strong:
        strengths.append("Excellent budget discipline")

    # Per-category overspend; a missing or zero budget has no meaningful percentage
    for cat in category_spending:
        if cat.over_budget and cat.budget:
            over_by = (cat.amount - cat.budget) / cat.budget * 100
            weaknesses.append(f"{cat.category} spending is {to_fixed(over_by)}% over budget")

    if metrics.discretionary_ratio > t.discretionary_high:
        weaknesses.append(f"Discretionary spending is {to_fixed(metrics.discretionary_ratio)}% of total")
        recommendations.append("Reduce discretionary spending to below 30% of total expenses.")

    return FinancialDiagnosis(
        weaknesses=weaknesses,
        strengths=strengths,
        alerts=alerts,
        recommendations=recommendations,
    )


def get_wealth_building_suggestions(metrics: FinancialMetrics) -> List[str]:
    """Ordered advice: foundation first (emergency fund, debt), then growth"""
    suggestions: List[str] = []

    if metrics.emergency_fund_months < 6:
        suggestions.append(
            f"Build emergency fund to 6 months (currently {to_fixed(metrics.emergency_fund_months, 1)} months). "
            "This is your financial foundation."
        )

    if metrics.debt_to_income_ratio > 20:
        suggestions.append(
            "Use the Avalanche method: Pay minimum on all debts, put extra toward highest-interest debt first."
        )

    suggestions.append("Consider a balanced allocation: 50% equity index funds, 30% debt funds, 20% liquid/emergency.")

    # Rough 10% CAGR over ten years
    monthly_investment = metrics.total_income * 0.2
    ten_year_projection = monthly_investment * 12 * 10 * 1.8
    suggestions.append(
        f"Investing ₹{to_fixed(monthly_investment)}/month (20% of income) could grow to "
        f"~₹{to_fixed(ten_year_projection / 100_000, 1)}L in 10 years with compounding."
    )

    suggestions.append(
        "Consider building a secondary income source. Even ₹5,000/month extra accelerates wealth building significantly."
    )

    return suggestions
