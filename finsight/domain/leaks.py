"""Lifestyle leak detection - recurring spending patterns that quietly erode savings"""

from typing import List, Optional, Sequence

from finsight.domain.models import LeakType, LifestyleLeak, Transaction
from finsight.domain.thresholds import (
    DEFAULT_LEAK_THRESHOLDS,
    FoodDeliveryRule,
    ImpulseSpendingRule,
    LeakThresholds,
    SubscriptionRule,
    WeekendSpendingRule,
)
from finsight.utils.date_utils import is_weekend
from finsight.utils.number_utils import plain_number


def _contains_any(text: Optional[str], keywords: Sequence[str]) -> bool:
    if not text:
        return False
    lowered = text.lower()
    return any(keyword.lower() in lowered for keyword in keywords)


def detect_impulse_spending(
    transactions: Sequence[Transaction], rule: ImpulseSpendingRule = ImpulseSpendingRule()
) -> Optional[LifestyleLeak]:
    """Many small purchases that add up"""
    small = [t for t in transactions if 0 < t.amount < rule.max_amount]
    total = sum(t.amount for t in small)
    if len(small) > rule.min_count and total > rule.min_total:
        return LifestyleLeak(
            type=LeakType.IMPULSE_SPENDING,
            description=f"{len(small)} small transactions under ₹{plain_number(rule.max_amount)}",
            amount=total,
            count=len(small),
            suggestion="Consider reviewing impulse purchases. Small spends add up quickly.",
        )
    return None


def detect_weekend_overspending(
    transactions: Sequence[Transaction], rule: WeekendSpendingRule = WeekendSpendingRule()
) -> Optional[LifestyleLeak]:
    """
    Compare average daily spend on weekends against weekdays.

    Daily averages divide by fixed day counts (8 weekend days, 22 weekdays)
    rather than counting the days actually present in the window, so a
    partial month skews the comparison.
    """
    weekend = [t for t in transactions if is_weekend(t.date)]
    weekend_total = sum(t.amount for t in weekend)
    weekday_total = sum(t.amount for t in transactions) - weekend_total

    avg_weekend_daily = weekend_total / rule.weekend_days
    avg_weekday_daily = weekday_total / rule.weekday_days

    if avg_weekend_daily > avg_weekday_daily * rule.multiplier:
        return LifestyleLeak(
            type=LeakType.WEEKEND_OVERSPENDING,
            description="Weekend spending is significantly higher than weekdays",
            amount=weekend_total,
            count=len(weekend),
            suggestion="Plan weekend activities with a budget. Consider free alternatives.",
        )
    return None


def detect_subscription_stacking(
    transactions: Sequence[Transaction], rule: SubscriptionRule = SubscriptionRule()
) -> Optional[LifestyleLeak]:
    subscriptions = [t for t in transactions if _contains_any(t.category, rule.category_keywords)]
    total = sum(t.amount for t in subscriptions)
    if total > rule.min_total:
        return LifestyleLeak(
            type=LeakType.SUBSCRIPTION_STACKING,
            description="Multiple subscription services detected",
            amount=total,
            count=len(subscriptions),
            suggestion="Audit subscriptions. Cancel unused services and consider sharing plans.",
        )
    return None


def detect_food_delivery(
    transactions: Sequence[Transaction], rule: FoodDeliveryRule = FoodDeliveryRule()
) -> Optional[LifestyleLeak]:
    orders = [
        t
        for t in transactions
        if _contains_any(t.category, rule.category_keywords) or _contains_any(t.merchant, rule.merchant_keywords)
    ]
    total = sum(t.amount for t in orders)
    if len(orders) > rule.min_count and total > rule.min_total:
        return LifestyleLeak(
            type=LeakType.FOOD_DELIVERY,
            description=f"{len(orders)} food delivery orders this month",
            amount=total,
            count=len(orders),
            suggestion="Meal prep can save 50-70% compared to delivery. Try cooking more at home.",
        )
    return None


def detect_lifestyle_leaks(
    transactions: Sequence[Transaction],
    thresholds: LeakThresholds = DEFAULT_LEAK_THRESHOLDS,
) -> List[LifestyleLeak]:
    """
    Run every leak detector over a window of spending transactions.

    Detectors are independent filters; a pattern that does not reach its
    threshold simply produces no entry. Output order is impulse, weekend,
    subscriptions, food delivery.
    """
    candidates = [
        detect_impulse_spending(transactions, thresholds.impulse),
        detect_weekend_overspending(transactions, thresholds.weekend),
        detect_subscription_stacking(transactions, thresholds.subscription),
        detect_food_delivery(transactions, thresholds.food_delivery),
    ]
    return [leak for leak in candidates if leak is not None]
