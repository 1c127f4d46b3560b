"""Prometheus metrics for monitoring score distribution, leaks, simulations and settlements"""

from typing import Sequence
from prometheus_client import Counter, Histogram

from finsight.domain.models import FinSightScore, LifestyleLeak, SettlementTransaction

# Score metrics
score_status_counter = Counter(
    "finsight_score_status_total",
    "FinSight scores computed by status bucket",
    ["status"],  # EXCELLENT | STABLE | RISKY | CRITICAL
)

score_histogram = Histogram(
    "finsight_score_value",
    "Distribution of composite FinSight scores",
    buckets=[20, 40, 60, 80, 100],
)

# Leak metrics
leak_counter = Counter(
    "finsight_lifestyle_leaks_total",
    "Lifestyle leaks detected",
    ["leak_type"],
)

# Simulation metrics
simulation_counter = Counter(
    "finsight_simulations_total",
    "Scenario simulations run",
    ["scenario_type"],
)

# Settlement metrics
settlement_counter = Counter(
    "finsight_settlements_total",
    "Settlement payments proposed",
)

settlement_amount_histogram = Histogram(
    "finsight_settlement_amount",
    "Size of proposed settlement payments",
    buckets=[100, 500, 1_000, 5_000, 10_000, 50_000],
)

# Engine latency
operation_duration_histogram = Histogram(
    "finsight_operation_duration_seconds",
    "Time spent in an engine operation",
    ["operation"],
)


def record_score(score: FinSightScore) -> None:
    """Record score metrics for monitoring health distribution"""
    score_status_counter.labels(status=score.status.value).inc()
    score_histogram.observe(score.total)


def record_leaks(leaks: Sequence[LifestyleLeak]) -> None:
    for leak in leaks:
        leak_counter.labels(leak_type=leak.type.value).inc()


def record_simulation(scenario_type: str) -> None:
    simulation_counter.labels(scenario_type=scenario_type).inc()


def record_settlements(settlements: Sequence[SettlementTransaction]) -> None:
    for settlement in settlements:
        settlement_counter.inc()
        settlement_amount_histogram.observe(settlement.amount)
