"""Domain models - immutable dataclasses representing engine inputs and results"""

import math
from dataclasses import dataclass, field, fields
from datetime import date
from enum import Enum
from typing import List, Optional

from finsight.domain.exceptions import InvalidInputError


def _require_finite(owner: object, *names: str) -> None:
    """Reject NaN/Infinity in the named numeric fields"""
    for name in names:
        value = getattr(owner, name)
        if value is None:
            continue
        if not math.isfinite(value):
            raise InvalidInputError(f"{type(owner).__name__}.{name} must be a finite number, got {value!r}")


class FinSightStatus(str, Enum):
    """Health bucket for the composite score"""

    EXCELLENT = "EXCELLENT"
    STABLE = "STABLE"
    RISKY = "RISKY"
    CRITICAL = "CRITICAL"

    @property
    def color(self) -> str:
        return _STATUS_COLORS[self]


_STATUS_COLORS = {
    FinSightStatus.EXCELLENT: "#10B981",  # emerald
    FinSightStatus.STABLE: "#3B82F6",  # blue
    FinSightStatus.RISKY: "#F59E0B",  # amber
    FinSightStatus.CRITICAL: "#EF4444",  # red
}


class ActionHorizon(str, Enum):
    """Time bucket of an action plan item"""

    THIRTY_DAY = "30_DAY"
    SIXTY_DAY = "60_DAY"
    NINETY_DAY = "90_DAY"


class LeakType(str, Enum):
    IMPULSE_SPENDING = "IMPULSE_SPENDING"
    WEEKEND_OVERSPENDING = "WEEKEND_OVERSPENDING"
    SUBSCRIPTION_STACKING = "SUBSCRIPTION_STACKING"
    FOOD_DELIVERY = "FOOD_DELIVERY"


class ScenarioType(str, Enum):
    INCREASE_SAVINGS = "INCREASE_SAVINGS"
    REDUCE_EXPENSE = "REDUCE_EXPENSE"
    INCREASE_INCOME = "INCREASE_INCOME"


# ============ RAW RECORDS ============


@dataclass(frozen=True)
class Transaction:
    """Ledger entry as supplied by the storage layer"""

    amount: float
    category: str
    date: date
    type: str = "DEBIT"  # "CREDIT" or "DEBIT"
    merchant: Optional[str] = None
    # Older records carry no transaction type; see effective_type
    transaction_type: Optional[str] = None
    description: str = ""

    def __post_init__(self) -> None:
        _require_finite(self, "amount")

    @property
    def effective_type(self) -> str:
        return self.transaction_type or "EXPENSE"

    @property
    def is_credit(self) -> bool:
        return self.type == "CREDIT"

    @property
    def is_debit(self) -> bool:
        return self.type == "DEBIT"


@dataclass(frozen=True)
class Account:
    name: str
    type: str  # "DEBIT" (bank), "CREDIT_CARD", ...
    balance: float

    def __post_init__(self) -> None:
        _require_finite(self, "balance")


@dataclass(frozen=True)
class Budget:
    category: str
    amount: float

    def __post_init__(self) -> None:
        _require_finite(self, "amount")


@dataclass(frozen=True)
class Debt:
    name: str
    remaining_amount: float

    def __post_init__(self) -> None:
        _require_finite(self, "remaining_amount")


@dataclass(frozen=True)
class IncomeSource:
    name: str
    amount: float
    frequency: str = "MONTHLY"  # MONTHLY | YEARLY | WEEKLY | ONE_TIME
    is_active: bool = True

    def __post_init__(self) -> None:
        _require_finite(self, "amount")


@dataclass(frozen=True)
class NetWorthSnapshot:
    year: int
    month: int
    net_worth: float

    def __post_init__(self) -> None:
        _require_finite(self, "net_worth")


@dataclass(frozen=True)
class FinancialSnapshot:
    """Everything the storage layer gathered for one user, pre-filtered to the analysis window"""

    as_of: date
    transactions: List[Transaction] = field(default_factory=list)
    accounts: List[Account] = field(default_factory=list)
    budgets: List[Budget] = field(default_factory=list)
    income_sources: List[IncomeSource] = field(default_factory=list)
    debts: List[Debt] = field(default_factory=list)
    net_worth_snapshots: List[NetWorthSnapshot] = field(default_factory=list)


@dataclass(frozen=True)
class FamilyTransfer:
    """Money one family member paid on behalf of another"""

    from_person: str
    to_person: str
    amount: float
    is_settled: bool = False
    transfer_date: Optional[date] = None

    def __post_init__(self) -> None:
        _require_finite(self, "amount")
        if self.amount < 0:
            raise InvalidInputError(f"FamilyTransfer.amount must not be negative, got {self.amount!r}")


# ============ ENGINE INPUTS ============


@dataclass(frozen=True)
class FinancialMetrics:
    """
    Snapshot of one period.

    All ratio fields are percentages on a 0-100 scale. Values outside that
    range are legal and are not clamped.
    """

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

    def __post_init__(self) -> None:
        _require_finite(self, *(f.name for f in fields(self)))


@dataclass(frozen=True)
class CategorySpending:
    category: str
    amount: float
    percentage: float
    trend: float  # % change from previous period
    budget: Optional[float] = None
    over_budget: bool = False

    def __post_init__(self) -> None:
        _require_finite(self, "amount", "percentage", "trend", "budget")


@dataclass(frozen=True)
class ScenarioChange:
    """A single what-if adjustment, expressed per month"""

    type: ScenarioType
    amount: float
    category: Optional[str] = None

    def __post_init__(self) -> None:
        _require_finite(self, "amount")
        try:
            object.__setattr__(self, "type", ScenarioType(self.type))
        except ValueError as e:
            raise InvalidInputError(f"Unknown scenario type: {self.type!r}") from e


# ============ ENGINE RESULTS ============


@dataclass(frozen=True)
class FinSightScore:
    total: int
    savings_rate_score: int
    budget_score: int
    debt_score: int
    expense_trend_score: int
    status: FinSightStatus
    status_color: str


@dataclass(frozen=True)
class FinancialDiagnosis:
    weaknesses: List[str] = field(default_factory=list)
    strengths: List[str] = field(default_factory=list)
    alerts: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ActionPlanItem:
    title: str
    description: str
    category: ActionHorizon
    priority: int  # lower = more urgent
    target_value: Optional[float] = None


@dataclass(frozen=True)
class LifestyleLeak:
    type: LeakType
    description: str
    amount: float
    count: int
    suggestion: str


@dataclass(frozen=True)
class FreedomProjection:
    target_amount: float
    years_to_reach: int
    months_to_reach: int
    required_monthly_savings: float
    current_monthly_savings: float
    on_track: bool


@dataclass(frozen=True)
class SimulationResult:
    scenario: str
    annual_impact: float
    five_year_impact: float
    net_worth_change: float
    new_savings_rate: float


@dataclass(frozen=True)
class RiskExposure:
    single_income_risk: float  # % of income from the largest source
    cash_heavy_risk: float  # % of assets held as cash
    leverage_risk: float  # liabilities vs assets
    alerts: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class FamilyBalance:
    person: str
    net_balance: float  # positive = owed money, negative = owes money


@dataclass(frozen=True)
class SettlementTransaction:
    from_person: str
    to_person: str
    amount: float


@dataclass(frozen=True)
class FamilyMonthSummary:
    total: float
    count: int
    month: str


@dataclass(frozen=True)
class GrowthReport:
    """Output of a full growth analysis"""

    metrics: FinancialMetrics
    finsight_score: FinSightScore
    category_spending: List[CategorySpending]
    diagnosis: FinancialDiagnosis
    lifestyle_leaks: List[LifestyleLeak]
    wealth_suggestions: List[str]
    risk_exposure: RiskExposure
    action_plan: List[ActionPlanItem]
    net_worth_history: List[NetWorthSnapshot]


@dataclass(frozen=True)
class FamilySettlementReport:
    balances: List[FamilyBalance]
    settlements: List[SettlementTransaction]
    monthly_summary: FamilyMonthSummary
