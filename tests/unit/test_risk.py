"""Unit tests for risk exposure analysis"""

import pytest
from finsight.domain.risk import analyze_risk_exposure


def test_concentrated_cash_heavy_leveraged_user():
    exposure = analyze_risk_exposure([100_000], total_assets=400_000, cash_assets=300_000, total_debts=240_000)

    assert exposure.single_income_risk == 100
    assert exposure.cash_heavy_risk == pytest.approx(75.0)
    assert exposure.leverage_risk == pytest.approx(60.0)
    assert len(exposure.alerts) == 3


def test_diversified_user_has_no_alerts():
    exposure = analyze_risk_exposure(
        [60_000, 30_000, 10_000], total_assets=1_000_000, cash_assets=200_000, total_debts=100_000
    )

    assert exposure.single_income_risk == pytest.approx(60.0)
    assert exposure.cash_heavy_risk == pytest.approx(20.0)
    assert exposure.leverage_risk == pytest.approx(10.0)
    assert exposure.alerts == []


def test_no_income_and_no_assets():
    """Test empty inputs: no income counts as fully concentrated, no assets as zero ratios"""
    exposure = analyze_risk_exposure([], total_assets=0, cash_assets=0, total_debts=50_000)

    assert exposure.single_income_risk == 100
    assert exposure.cash_heavy_risk == 0
    assert exposure.leverage_risk == 0
    assert exposure.alerts == ["High dependency on single income source. Consider diversifying income streams."]
