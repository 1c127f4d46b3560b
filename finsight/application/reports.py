"""Growth reports, simulations and family settle-up built on the pure engine"""

import logging
import time
import uuid
from datetime import date
from typing import List, Optional, Sequence

from finsight.config import settings
from finsight.domain.action_plan import generate_action_plan
from finsight.domain.aggregation import (
    build_category_spending,
    build_financial_metrics,
    cash_assets,
    expense_transactions,
    net_worth_history,
    split_by_month,
    total_assets,
    total_debts,
)
from finsight.domain.diagnosis import generate_diagnosis, get_wealth_building_suggestions
from finsight.domain.exceptions import DomainException
from finsight.domain.freedom import calculate_multiple_freedom_targets
from finsight.domain.leaks import detect_lifestyle_leaks
from finsight.domain.models import (
    ActionPlanItem,
    CategorySpending,
    FamilySettlementReport,
    FamilyTransfer,
    FinancialDiagnosis,
    FinancialMetrics,
    FinancialSnapshot,
    FreedomProjection,
    GrowthReport,
    ScenarioChange,
    SimulationResult,
)
from finsight.domain.risk import analyze_risk_exposure
from finsight.domain.scoring import calculate_finsight_score
from finsight.domain.settlement import calculate_family_balances, optimize_settlements, summarize_family_month
from finsight.domain.simulation import simulate_scenario
from finsight.infrastructure.observability.logging import log_report, log_settlement, log_simulation
from finsight.infrastructure.observability.metrics import (
    operation_duration_histogram,
    record_leaks,
    record_score,
    record_settlements,
    record_simulation,
)


def _new_request_id() -> str:
    return str(uuid.uuid4())


def build_growth_report(snapshot: FinancialSnapshot, request_id: Optional[str] = None) -> GrowthReport:
    """
    Run the full analysis for one user.

    Flow:
    1. Aggregate raw records into metrics and category spending
    2. Score, diagnose and detect leaks over this month's spending
    3. Wealth suggestions, risk exposure and the 30/60/90-day plan
    4. Record metrics and log the outcome
    """
    start_time = time.time()
    request_id = request_id or _new_request_id()

    try:
        with operation_duration_histogram.labels(operation="growth_report").time():
            metrics = build_financial_metrics(
                snapshot,
                default_monthly_income=settings.default_monthly_income,
                default_monthly_expenses=settings.default_monthly_expenses,
            )
            category_spending = build_category_spending(snapshot)

            score = calculate_finsight_score(metrics)
            diagnosis = generate_diagnosis(metrics, category_spending)

            this_month, _ = split_by_month(snapshot)
            # Expense records only; income credits and card bill payments are left out
            leaks = detect_lifestyle_leaks(expense_transactions(this_month))

            risk_exposure = analyze_risk_exposure(
                [s.amount for s in snapshot.income_sources if s.is_active],
                total_assets(snapshot.accounts),
                cash_assets(snapshot.accounts),
                total_debts(snapshot.debts),
            )

            report = GrowthReport(
                metrics=metrics,
                finsight_score=score,
                category_spending=sorted(category_spending, key=lambda c: c.amount, reverse=True),
                diagnosis=diagnosis,
                lifestyle_leaks=leaks,
                wealth_suggestions=get_wealth_building_suggestions(metrics),
                risk_exposure=risk_exposure,
                action_plan=generate_action_plan(metrics, diagnosis, category_spending),
                net_worth_history=list(reversed(net_worth_history(snapshot.net_worth_snapshots))),
            )
    except DomainException as e:
        logging.warning(f"Invalid financial data: {e}", extra={"request_id": request_id})
        raise

    record_score(score)
    record_leaks(leaks)
    duration_ms = (time.time() - start_time) * 1000
    log_report(request_id, score.total, score.status.value, len(leaks), duration_ms)

    return report


def build_action_plan(metrics: FinancialMetrics, category_spending: List[CategorySpending]) -> List[ActionPlanItem]:
    """Regenerate the 30/60/90-day plan from metrics the dashboard already holds"""
    with operation_duration_histogram.labels(operation="action_plan").time():
        plans = generate_action_plan(metrics, FinancialDiagnosis(), category_spending)
    logging.info("Action plan generated", extra={"step": "action_plan_complete", "item_count": len(plans)})
    return plans


def run_simulation(
    metrics: FinancialMetrics, change: ScenarioChange, request_id: Optional[str] = None
) -> SimulationResult:
    start_time = time.time()
    request_id = request_id or _new_request_id()

    with operation_duration_histogram.labels(operation="simulation").time():
        result = simulate_scenario(metrics, change)

    record_simulation(change.type.value)
    duration_ms = (time.time() - start_time) * 1000
    log_simulation(request_id, result.scenario, result.annual_impact, duration_ms)
    return result


def project_freedom(current_savings: float, monthly_savings: float) -> List[FreedomProjection]:
    """Project the standard milestones with the configured return rate and horizon"""
    try:
        with operation_duration_histogram.labels(operation="freedom_projection").time():
            projections = calculate_multiple_freedom_targets(
                current_savings,
                monthly_savings,
                annual_return_rate=settings.default_annual_return_rate,
                max_months=settings.freedom_max_months,
            )
    except DomainException as e:
        logging.warning(f"Invalid projection input: {e}")
        raise

    logging.info(
        "Freedom projection completed",
        extra={
            "step": "freedom_projection_complete",
            "targets_on_track": sum(1 for p in projections if p.on_track),
        },
    )
    return projections


def settle_family_transfers(
    transfers: Sequence[FamilyTransfer], as_of: date, request_id: Optional[str] = None
) -> FamilySettlementReport:
    """Net unsettled family transfers and propose the payments that clear them"""
    start_time = time.time()
    request_id = request_id or _new_request_id()

    with operation_duration_histogram.labels(operation="settlement").time():
        balances = calculate_family_balances(transfers)
        settlements = optimize_settlements(balances)
        summary = summarize_family_month(transfers, as_of)

    record_settlements(settlements)
    duration_ms = (time.time() - start_time) * 1000
    log_settlement(
        request_id,
        people=len(balances),
        settlement_count=len(settlements),
        total_settled=round(sum(s.amount for s in settlements), 2),
        duration_ms=duration_ms,
    )

    return FamilySettlementReport(balances=balances, settlements=settlements, monthly_summary=summary)
