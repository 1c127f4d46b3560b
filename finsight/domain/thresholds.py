"""Tunable thresholds, grouped by the rule or detector that reads them"""

from dataclasses import dataclass, field
from typing import Tuple


# ============ LIFESTYLE LEAKS ============


@dataclass(frozen=True)
class ImpulseSpendingRule:
    max_amount: float = 500  # a "small" transaction is strictly below this
    min_count: int = 10  # flagged when count exceeds this
    min_total: float = 5000  # ...and the total exceeds this


@dataclass(frozen=True)
class WeekendSpendingRule:
    # Fixed per-month day counts, not derived from the actual window
    weekend_days: int = 8
    weekday_days: int = 22
    multiplier: float = 1.5


@dataclass(frozen=True)
class SubscriptionRule:
    category_keywords: Tuple[str, ...] = ("Subscriptions", "Entertainment", "Streaming")
    min_total: float = 2000


@dataclass(frozen=True)
class FoodDeliveryRule:
    category_keywords: Tuple[str, ...] = ("food",)
    merchant_keywords: Tuple[str, ...] = ("swiggy", "zomato")
    min_count: int = 15
    min_total: float = 5000


@dataclass(frozen=True)
class LeakThresholds:
    impulse: ImpulseSpendingRule = field(default_factory=ImpulseSpendingRule)
    weekend: WeekendSpendingRule = field(default_factory=WeekendSpendingRule)
    subscription: SubscriptionRule = field(default_factory=SubscriptionRule)
    food_delivery: FoodDeliveryRule = field(default_factory=FoodDeliveryRule)


DEFAULT_LEAK_THRESHOLDS = LeakThresholds()


# ============ DIAGNOSIS ============


@dataclass(frozen=True)
class DiagnosisThresholds:
    savings_critical: float = 10
    savings_target: float = 20
    debt_high: float = 40
    debt_elevated: float = 25
    debt_low: float = 15
    expense_growth_high: float = 15
    emergency_fund_min_months: float = 3
    emergency_fund_target_months: float = 6
    net_worth_growth_stagnant: float = 2
    net_worth_growth_strong: float = 5
    budget_adherence_low: float = 60
    budget_adherence_strong: float = 85
    discretionary_high: float = 40


DEFAULT_DIAGNOSIS_THRESHOLDS = DiagnosisThresholds()


# ============ ACTION PLAN ============


@dataclass(frozen=True)
class ActionPlanThresholds:
    savings_target: float = 20
    max_savings_step: float = 5
    emergency_fund_min_months: float = 3
    emergency_fund_target_months: float = 6
    emergency_fund_monthly_top_up: float = 10_000
    debt_payoff_ratio: float = 30
    extra_debt_payment: float = 5_000
    sip_increase: float = 2_000
    discretionary_high: float = 35
    discretionary_target: float = 30
    long_term_savings_target: float = 25


DEFAULT_ACTION_PLAN_THRESHOLDS = ActionPlanThresholds()


# ============ RISK EXPOSURE ============


@dataclass(frozen=True)
class RiskExposureThresholds:
    single_income: float = 80
    cash_heavy: float = 40
    leverage: float = 50


DEFAULT_RISK_THRESHOLDS = RiskExposureThresholds()


# ============ PROJECTIONS & SIMULATION ============

DEFAULT_ANNUAL_RETURN_RATE = 0.10
MAX_PROJECTION_MONTHS = 600  # 50 years
FALLBACK_PAYOFF_MONTHS = 120  # spread the gap over 10 years when the cap is hit

# 10L, 50L, 1Cr, 2.5Cr
FREEDOM_TARGETS: Tuple[float, ...] = (1_000_000, 5_000_000, 10_000_000, 25_000_000)

FIVE_YEAR_YEARS = 5
FIVE_YEAR_GROWTH_FACTOR = 1.5  # flat stand-in for compounding

# ============ SETTLEMENT ============

SETTLEMENT_EPSILON = 0.01

# ============ AGGREGATION ============

DISCRETIONARY_CATEGORIES: Tuple[str, ...] = ("Entertainment", "Shopping", "Dining", "Food", "Travel", "Subscriptions")
RECURRING_CATEGORIES: Tuple[str, ...] = ("subscription", "rent", "emi", "insurance")
EMERGENCY_ACCOUNT_KEYWORDS: Tuple[str, ...] = ("saving", "emergency")
CASH_ACCOUNT_KEYWORDS: Tuple[str, ...] = ("saving", "cash")
EXCLUDED_EXPENSE_CATEGORIES: Tuple[str, ...] = ("Bill Payment",)
LIABILITY_SETTLEMENT_TYPES: Tuple[str, ...] = ("CREDIT_CARD_PAYMENT",)
