"""Level-payment loan math, compound growth, and savings targets"""

import math

from credit_analyzer.domain.exceptions import InvalidRateError


def monthly_rate(annual_rate_pct: float) -> float:
    """Annual percentage rate (0-100) to a monthly decimal rate"""
    return annual_rate_pct / 100 / 12


def monthly_payment(principal: float, annual_rate_pct: float, term_months: int) -> float:
    """
    Level monthly payment that amortizes `principal` over `term_months`.

    A zero term or zero rate returns the principal itself rather than an
    interest-free split.
    """
    if term_months == 0 or annual_rate_pct == 0:
        return principal

    rate = monthly_rate(annual_rate_pct)
    growth = (1 + rate) ** term_months

    return principal * rate * growth / (growth - 1)


def total_interest(principal: float, monthly_payment: float, term_months: int) -> float:
    return monthly_payment * term_months - principal


def payoff_months(balance: float, monthly_payment: float, annual_rate_pct: float) -> float:
    """
    Months needed to pay off `balance` at a fixed payment (fractional).

    Returns math.inf when the payment is not positive or never covers the
    monthly interest; callers must render that explicitly.
    """
    if monthly_payment <= 0:
        return math.inf
    if balance <= 0:
        return 0.0

    rate = monthly_rate(annual_rate_pct)
    if rate == 0:
        return balance / monthly_payment

    interest = balance * rate
    if monthly_payment <= interest:
        return math.inf

    return math.log(monthly_payment / (monthly_payment - interest)) / math.log(1 + rate)


def compound_growth(
    principal: float,
    annual_rate_pct: float,
    years: float,
    compounds_per_year: int = 12,
) -> float:
    """principal * (1 + r/n) ** (n*t)"""
    if compounds_per_year <= 0:
        raise InvalidRateError(f"compounds_per_year must be positive, got {compounds_per_year}")

    rate = annual_rate_pct / 100
    n = compounds_per_year

    return principal * (1 + rate / n) ** (n * years)


def _annuity_factor(rate: float, months: float) -> float:
    """Future value of 1/month for `months` months at `rate` per month"""
    if rate == 0:
        return months
    return ((1 + rate) ** months - 1) / rate


def future_value_with_contributions(
    principal: float,
    monthly_contribution: float,
    annual_rate_pct: float,
    years: float,
) -> float:
    """Principal compounded monthly plus the future value of a monthly contribution stream"""
    rate = monthly_rate(annual_rate_pct)
    months = years * 12

    future_principal = principal * (1 + rate) ** months
    future_contributions = monthly_contribution * _annuity_factor(rate, months)

    return future_principal + future_contributions


def required_monthly_savings(
    target_amount: float,
    current_savings: float,
    annual_rate_pct: float,
    years: float,
) -> float:
    """
    Monthly contribution needed to reach `target_amount` in `years`.

    Returns 0 when current savings compounded over the horizon already meet
    the target. With no horizon left the whole shortfall is due now.
    """
    rate = monthly_rate(annual_rate_pct)
    months = years * 12

    shortfall = target_amount - current_savings * (1 + rate) ** months
    if shortfall <= 0:
        return 0.0
    if months <= 0:
        return shortfall

    return shortfall / _annuity_factor(rate, months)
