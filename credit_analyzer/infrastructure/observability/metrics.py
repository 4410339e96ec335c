"""Prometheus metrics for score estimates, payoff plans, and calculation latency"""

from prometheus_client import Counter, Histogram

# Scoring metrics
score_estimate_counter = Counter(
    "credit_analyzer_score_estimates_total",
    "Composite score estimates produced",
    ["score_range"],  # excellent | very_good | good | fair | poor
)

score_histogram = Histogram(
    "credit_analyzer_projected_score",
    "Distribution of projected 300-850 scores",
    buckets=[580, 670, 740, 800, 850],
)

simulation_counter = Counter(
    "credit_analyzer_simulations_total",
    "What-if credit simulations run",
    ["simulation_type"],
)

# Debt strategy metrics
payoff_plan_counter = Counter(
    "credit_analyzer_payoff_plans_total",
    "Debt payoff plans simulated",
    ["strategy"],
)

non_amortizing_counter = Counter(
    "credit_analyzer_non_amortizing_debts_total",
    "Payoff simulations rejected because a debt never pays off",
)

payoff_months_histogram = Histogram(
    "credit_analyzer_months_to_debt_free",
    "Months until every debt in a plan is cleared",
    buckets=[6, 12, 24, 36, 60, 120, 240, 600, 1200],
)

# Calculation latency
calculation_duration_histogram = Histogram(
    "credit_analyzer_calculation_duration_seconds",
    "Engine calculation latency",
    ["operation"],
)


def record_score_estimate(score_range: str, score: int) -> None:
    score_estimate_counter.labels(score_range=score_range).inc()
    score_histogram.observe(score)


def record_payoff_plan(strategy: str, months_to_debt_free: int) -> None:
    """Record plan metrics for monitoring strategy usage and payoff horizons"""
    payoff_plan_counter.labels(strategy=strategy).inc()
    payoff_months_histogram.observe(months_to_debt_free)
