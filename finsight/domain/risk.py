"""Concentration and leverage risk checks over income and assets"""

from typing import List, Sequence

from finsight.domain.models import RiskExposure
from finsight.domain.thresholds import DEFAULT_RISK_THRESHOLDS, RiskExposureThresholds


def analyze_risk_exposure(
    income_amounts: Sequence[float],
    total_assets: float,
    cash_assets: float,
    total_debts: float,
    thresholds: RiskExposureThresholds = DEFAULT_RISK_THRESHOLDS,
) -> RiskExposure:
    """
    Measure dependency on one income source, idle cash and leverage (all in %).

    With no income at all the single-source risk is reported as 100; with no
    assets the cash and leverage ratios are 0.
    """
    alerts: List[str] = []
    total_income = sum(income_amounts)
    max_income = max(income_amounts, default=0)

    single_income_risk = (max_income / total_income) * 100 if total_income > 0 else 100
    cash_heavy_risk = (cash_assets / total_assets) * 100 if total_assets > 0 else 0
    leverage_risk = (total_debts / total_assets) * 100 if total_assets > 0 else 0

    if single_income_risk > thresholds.single_income:
        alerts.append("High dependency on single income source. Consider diversifying income streams.")

    if cash_heavy_risk > thresholds.cash_heavy:
        alerts.append("Too much idle cash. Consider investing excess for better returns.")

    if leverage_risk > thresholds.leverage:
        alerts.append("High leverage ratio. Focus on debt reduction to improve financial stability.")

    return RiskExposure(
        single_income_risk=single_income_risk,
        cash_heavy_risk=cash_heavy_risk,
        leverage_risk=leverage_risk,
        alerts=alerts,
    )
