"""Bounds checks for values crossing the engine boundary"""

import math

CREDIT_SCORE_MIN = 300
CREDIT_SCORE_MAX = 850


def validate_credit_score(score: float) -> bool:
    return CREDIT_SCORE_MIN <= score <= CREDIT_SCORE_MAX


def validate_business_credit_score(score: float) -> bool:
    return 0 <= score <= 100


def validate_credit_utilization(utilization: float) -> bool:
    return 0 <= utilization <= 100


def validate_percentage(value: float) -> bool:
    """Rates are expressed 0-100, not 0-1"""
    return math.isfinite(value) and 0 <= value <= 100


def is_finite_amount(amount: float) -> bool:
    """Currency amounts must be finite and non-negative"""
    return math.isfinite(amount) and amount >= 0
