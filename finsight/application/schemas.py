"""Pydantic schemas for serializing engine results to the dashboard"""

from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from finsight.domain.models import ActionHorizon, FinSightStatus, LeakType


class ResultSchema(BaseModel):
    """Reads engine dataclasses by attribute and dumps camelCase keys"""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class FinancialMetricsSchema(ResultSchema):
    total_income: float
    total_expenses: float
    savings_rate: float
    debt_to_income_ratio: float
    net_worth: float
    net_worth_growth: float
    budget_adherence: float
    expense_growth_rate: float
    discretionary_ratio: float
    recurring_expenses: float
    emergency_fund_months: float


class CategorySpendingSchema(ResultSchema):
    category: str
    amount: float
    percentage: float
    trend: float
    budget: Optional[float] = None
    over_budget: bool


class FinSightScoreSchema(ResultSchema):
    total: int
    savings_rate_score: int
    budget_score: int
    debt_score: int
    expense_trend_score: int
    status: FinSightStatus
    status_color: str


class DiagnosisSchema(ResultSchema):
    weaknesses: List[str]
    strengths: List[str]
    alerts: List[str]
    recommendations: List[str]


class LifestyleLeakSchema(ResultSchema):
    type: LeakType
    description: str
    amount: float
    count: int
    suggestion: str


class RiskExposureSchema(ResultSchema):
    single_income_risk: float
    cash_heavy_risk: float
    leverage_risk: float
    alerts: List[str]


class ActionPlanItemSchema(ResultSchema):
    title: str
    description: str
    category: ActionHorizon
    priority: int
    target_value: Optional[float] = None


class NetWorthSnapshotSchema(ResultSchema):
    year: int
    month: int
    net_worth: float


class GrowthReportSchema(ResultSchema):
    """Response body for the growth dashboard"""

    metrics: FinancialMetricsSchema
    finsight_score: FinSightScoreSchema = Field(alias="finSightScore")
    category_spending: List[CategorySpendingSchema]
    diagnosis: DiagnosisSchema
    lifestyle_leaks: List[LifestyleLeakSchema]
    wealth_suggestions: List[str]
    risk_exposure: RiskExposureSchema
    action_plan: List[ActionPlanItemSchema]
    net_worth_history: List[NetWorthSnapshotSchema]


class FreedomProjectionSchema(ResultSchema):
    target_amount: float
    years_to_reach: int
    months_to_reach: int
    required_monthly_savings: float
    current_monthly_savings: float
    on_track: bool


class SimulationResultSchema(ResultSchema):
    scenario: str
    annual_impact: float
    five_year_impact: float
    net_worth_change: float
    new_savings_rate: float


class FamilyBalanceSchema(ResultSchema):
    person: str
    net_balance: float


class SettlementSchema(ResultSchema):
    from_person: str = Field(alias="from")
    to_person: str = Field(alias="to")
    amount: float


class FamilyMonthSummarySchema(ResultSchema):
    total: float
    count: int
    month: str


class FamilySettlementSchema(ResultSchema):
    """Response body for the family settle-up view"""

    balances: List[FamilyBalanceSchema]
    settlements: List[SettlementSchema]
    monthly_summary: FamilyMonthSummarySchema


def to_payload(schema: Type[ResultSchema], result: Any) -> Dict[str, Any]:
    """Validate an engine result against `schema` and dump JSON-ready camelCase data"""
    return schema.model_validate(result).model_dump(mode="json", by_alias=True)
