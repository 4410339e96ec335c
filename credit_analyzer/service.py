"""Instrumented entry points for the route layer - timing, metrics and structured logs around the pure engine"""

import logging
import math
import time
from datetime import date
from typing import Optional, Sequence

from credit_analyzer.domain.debt_strategy import simulate_payoff
from credit_analyzer.domain.exceptions import NonAmortizingDebtError
from credit_analyzer.domain.models import (
    CompositeScoreEstimate,
    CreditProfile,
    CreditSimulationResult,
    DebtAccount,
    PaymentStrategy,
    PayoffPlan,
)
from credit_analyzer.domain.scoring import estimate_credit_score
from credit_analyzer.domain.simulation import CreditAction, simulate_credit_action
from credit_analyzer.infrastructure.observability.logging import (
    log_payoff_plan,
    log_score_estimate,
    log_simulation,
)
from credit_analyzer.infrastructure.observability.metrics import (
    calculation_duration_histogram,
    non_amortizing_counter,
    record_payoff_plan,
    record_score_estimate,
    simulation_counter,
)

logger = logging.getLogger(__name__)


def format_months(months: float) -> str:
    """Render a payoff duration; an infinite duration reads "never" """
    if math.isinf(months):
        return "never"
    return f"{math.ceil(months)} months"


def estimate_score(profile: CreditProfile, today: Optional[date] = None) -> CompositeScoreEstimate:
    """Score a credit profile and record the outcome"""
    start_time = time.perf_counter()

    with calculation_duration_histogram.labels(operation="estimate_score").time():
        estimate = estimate_credit_score(profile, today=today)

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_score_estimate(estimate.score_range.value, estimate.score)
    log_score_estimate(estimate.score, estimate.score_range.value, estimate.composite, duration_ms)

    return estimate


def plan_debt_payoff(
    debts: Sequence[DebtAccount],
    strategy: PaymentStrategy = PaymentStrategy.SNOWBALL,
    max_months: Optional[int] = None,
) -> PayoffPlan:
    """
    Simulate a payoff plan and record the outcome.

    Raises:
        NonAmortizingDebtError: re-raised after being counted and logged
    """
    start_time = time.perf_counter()
    strategy = PaymentStrategy(strategy)

    try:
        with calculation_duration_histogram.labels(operation="plan_debt_payoff").time():
            plan = simulate_payoff(debts, strategy, max_months)

    except NonAmortizingDebtError as e:
        non_amortizing_counter.inc()
        logger.warning(
            f"Non-amortizing debt: {e}",
            extra={"strategy": strategy.value, "max_months": e.max_months},
        )
        raise

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_payoff_plan(strategy.value, plan.months_to_debt_free)
    log_payoff_plan(strategy.value, len(debts), plan.months_to_debt_free, plan.total_interest, duration_ms)

    return plan


def run_credit_simulation(
    profile: CreditProfile,
    action: CreditAction,
    today: Optional[date] = None,
) -> CreditSimulationResult:
    """Run a what-if simulation and record the outcome"""
    start_time = time.perf_counter()

    with calculation_duration_histogram.labels(operation="run_credit_simulation").time():
        result = simulate_credit_action(profile, action, today=today)

    duration_ms = (time.perf_counter() - start_time) * 1000
    simulation_counter.labels(simulation_type=result.simulation_type.value).inc()
    log_simulation(result.simulation_type.value, result.current.score, result.projected.score, duration_ms)

    return result
