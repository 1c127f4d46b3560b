"""Unit tests for lifestyle leak detection"""

from datetime import date, datetime, timedelta
from finsight.domain.leaks import (
    detect_food_delivery,
    detect_impulse_spending,
    detect_lifestyle_leaks,
    detect_subscription_stacking,
    detect_weekend_overspending,
)
from finsight.domain.models import LeakType, Transaction
from finsight.domain.thresholds import ImpulseSpendingRule, LeakThresholds, WeekendSpendingRule

MONDAY = date(2026, 10, 12)
SATURDAY = date(2026, 10, 17)


def _spend(amount, category="Misc", day=MONDAY, merchant=None):
    return Transaction(amount=amount, category=category, date=day, merchant=merchant)


def test_empty_transactions_have_no_leaks():
    assert detect_lifestyle_leaks([]) == []


def test_impulse_spending_flagged():
    """Test more than 10 small purchases totalling over 5000"""
    transactions = [_spend(450) for _ in range(12)]  # 5400

    leak = detect_impulse_spending(transactions)

    assert leak is not None
    assert leak.type is LeakType.IMPULSE_SPENDING
    assert leak.amount == 5400
    assert leak.count == 12
    assert leak.description == "12 small transactions under ₹500"


def test_impulse_spending_needs_both_count_and_total():
    """Test many tiny purchases or few mid-size ones are not flagged"""
    # Count met, total not: 11 x 100 = 1100
    assert detect_impulse_spending([_spend(100, "Food") for _ in range(11)]) is None
    # Total met via count below threshold: 5 x 100
    assert detect_impulse_spending([_spend(100, "Food") for _ in range(5)]) is None
    # 10 x 499 = 4990, count not above 10
    assert detect_impulse_spending([_spend(499) for _ in range(10)]) is None


def test_impulse_spending_with_lower_total_threshold():
    """Test 11 purchases of 100 are flagged once the total threshold is lowered"""
    rule = ImpulseSpendingRule(min_total=1000)
    leak = detect_impulse_spending([_spend(100, "Food") for _ in range(11)], rule)

    assert leak is not None
    assert leak.amount == 1100
    assert leak.count == 11


def test_impulse_spending_excludes_large_and_non_positive_amounts():
    transactions = [_spend(480) for _ in range(11)] + [_spend(500), _spend(0), _spend(-200)]

    leak = detect_impulse_spending(transactions)

    assert leak is not None
    assert leak.count == 11
    assert leak.amount == 5280


def test_weekend_overspending_uses_fixed_day_counts():
    """
    Test daily averages divide by 8 weekend days and 22 weekdays.

    The divisors do not depend on how many weekend days the window actually
    contains: a single Saturday of 1000 against 1000 on a Monday is flagged
    (125/day vs 45.45/day).
    """
    transactions = [_spend(1000, day=SATURDAY), _spend(1000, day=MONDAY)]

    leak = detect_weekend_overspending(transactions)

    assert leak is not None
    assert leak.type is LeakType.WEEKEND_OVERSPENDING
    assert leak.amount == 1000
    assert leak.count == 1


def test_weekend_overspending_boundary():
    """Test weekend average must be strictly above 1.5x weekday average"""
    # weekend 8 * 150 = 1200 -> 150/day; weekday 22 * 100 = 2200 -> 100/day; 150 == 1.5 * 100
    transactions = [_spend(1200, day=SATURDAY), _spend(2200, day=MONDAY)]
    assert detect_weekend_overspending(transactions) is None

    transactions = [_spend(1201, day=SATURDAY), _spend(2200, day=MONDAY)]
    assert detect_weekend_overspending(transactions) is not None


def test_weekend_detection_accepts_datetimes():
    transactions = [_spend(5000, day=datetime(2026, 10, 18, 21, 30))]  # Sunday evening
    leak = detect_weekend_overspending(transactions)
    assert leak is not None
    assert leak.count == 1


def test_weekend_rule_is_tunable():
    transactions = [_spend(1000, day=SATURDAY), _spend(1000, day=MONDAY)]
    relaxed = WeekendSpendingRule(multiplier=5)
    assert detect_weekend_overspending(transactions, relaxed) is None


def test_subscription_stacking_matches_category_substrings():
    """Test case-insensitive match on Subscriptions, Entertainment, Streaming"""
    transactions = [
        _spend(649, "OTT Streaming"),
        _spend(499, "subscriptions"),
        _spend(899, "Entertainment - Movies"),
        _spend(5000, "Groceries"),
    ]

    leak = detect_subscription_stacking(transactions)

    assert leak is not None
    assert leak.type is LeakType.SUBSCRIPTION_STACKING
    assert leak.amount == 2047
    assert leak.count == 3


def test_subscription_total_must_exceed_2000():
    assert detect_subscription_stacking([_spend(1000, "Streaming"), _spend(1000, "Subscriptions")]) is None


def test_food_delivery_matches_category_or_merchant():
    """Test food category or Swiggy/Zomato merchant counts as a delivery order"""
    transactions = (
        [_spend(300, "Food", merchant="Local Cafe") for _ in range(6)]
        + [_spend(400, "Misc", merchant="Swiggy Instamart") for _ in range(5)]
        + [_spend(500, "Dining Out", merchant="ZOMATO") for _ in range(5)]
        + [_spend(300, "Dining Out", merchant=None)]
    )

    leak = detect_food_delivery(transactions)

    assert leak is not None
    assert leak.type is LeakType.FOOD_DELIVERY
    assert leak.count == 16
    assert leak.amount == 1800 + 2000 + 2500
    assert leak.description == "16 food delivery orders this month"


def test_food_delivery_needs_more_than_15_orders():
    transactions = [_spend(1000, "Food Delivery") for _ in range(15)]
    assert detect_food_delivery(transactions) is None


def test_detect_lifestyle_leaks_order_and_independence():
    """Test all four detectors can fire together, in fixed order"""
    transactions = (
        [_spend(450, "Food", day=SATURDAY) for _ in range(16)]  # impulse + food + weekend
        + [_spend(2500, "Streaming", day=MONDAY)]  # subscriptions
    )

    leaks = detect_lifestyle_leaks(transactions)

    assert [leak.type for leak in leaks] == [
        LeakType.IMPULSE_SPENDING,
        LeakType.WEEKEND_OVERSPENDING,
        LeakType.SUBSCRIPTION_STACKING,
        LeakType.FOOD_DELIVERY,
    ]


def test_detect_lifestyle_leaks_custom_thresholds():
    transactions = [_spend(100, "Food", day=MONDAY + timedelta(days=i % 4)) for i in range(11)]
    thresholds = LeakThresholds(impulse=ImpulseSpendingRule(min_total=1000))

    leaks = detect_lifestyle_leaks(transactions, thresholds)

    assert [leak.type for leak in leaks] == [LeakType.IMPULSE_SPENDING]


def test_detect_lifestyle_leaks_is_deterministic():
    transactions = [_spend(450, "Food", day=SATURDAY) for _ in range(16)]
    assert detect_lifestyle_leaks(transactions) == detect_lifestyle_leaks(transactions)
