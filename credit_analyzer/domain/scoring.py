"""Credit score factor model - sub-scores per factor and weighted composite"""

from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional, Union

from credit_analyzer.domain.models import (
    FACTOR_WEIGHTS,
    BusinessCreditRange,
    CompositeScoreEstimate,
    CreditProfile,
    CreditScoreFactor,
    CreditScoreRange,
    FactorScore,
    PaymentHistoryEntry,
    PaymentStatus,
)
from credit_analyzer.utils.date_utils import date_bounds, years_between
from credit_analyzer.utils.formatting import clamp
from credit_analyzer.utils.validation import CREDIT_SCORE_MAX, CREDIT_SCORE_MIN

PAYMENT_STATUS_PENALTIES: Dict[PaymentStatus, int] = {
    PaymentStatus.CURRENT: 0,
    PaymentStatus.LATE_30_DAYS: -10,
    PaymentStatus.LATE_60_DAYS: -25,
    PaymentStatus.LATE_90_DAYS: -50,
    PaymentStatus.COLLECTION: -75,
    PaymentStatus.CHARGE_OFF: -100,
}


def _status_of(item: Union[PaymentStatus, PaymentHistoryEntry, str]) -> PaymentStatus:
    if isinstance(item, PaymentHistoryEntry):
        return item.status
    return PaymentStatus(item)


def payment_history_score(statuses: Iterable[Union[PaymentStatus, PaymentHistoryEntry]]) -> float:
    """
    Score payment history from 0 (worst) to 100 (spotless).

    Starts at 100 and applies a fixed penalty per reported status, then clamps.
    An empty history scores 0: no data, not "no penalty".
    """
    history = [_status_of(s) for s in statuses]
    if not history:
        return 0

    score = 100 + sum(PAYMENT_STATUS_PENALTIES[status] for status in history)
    return clamp(score, 0, 100)


def account_age_score(oldest: date, newest: date, today: Optional[date] = None) -> float:
    """
    Score account age from the oldest account's open date.

    Average age is approximated as half the oldest account's age. `newest` is
    accepted for signature compatibility but does not enter the calculation.

    Breakpoints (average age in years): >=10 -> 100, >=7 -> 85, >=5 -> 70,
    >=3 -> 55, >=1 -> 40, otherwise 20.
    """
    today = today or date.today()
    average_age = years_between(oldest, today) / 2

    if average_age >= 10:
        return 100
    if average_age >= 7:
        return 85
    if average_age >= 5:
        return 70
    if average_age >= 3:
        return 55
    if average_age >= 1:
        return 40
    return 20


def credit_mix_score(account_types: Iterable[str]) -> float:
    """Score by number of distinct account types"""
    unique_types = len(set(account_types))

    if unique_types >= 5:
        return 100
    if unique_types >= 4:
        return 85
    if unique_types >= 3:
        return 70
    if unique_types >= 2:
        return 50
    return 25


def inquiry_score(inquiry_count: float, window_months: float = 12) -> float:
    """
    Score hard-inquiry frequency over a lookback window.

    A zero-month window scores 100 (nothing to divide by).
    """
    if window_months == 0:
        return 100

    per_month = inquiry_count / window_months

    if per_month == 0:
        return 100
    if per_month <= 0.5:
        return 85
    if per_month <= 1:
        return 70
    if per_month <= 2:
        return 50
    return 25


def utilization_percent(total_balance: float, total_limit: float) -> float:
    """Balance as a percentage of limit; not clamped, over-limit exceeds 100"""
    if total_limit == 0:
        return 0
    return 100 * total_balance / total_limit


def utilization_score(utilization_pct: float) -> float:
    """Lower utilization scores higher; over-limit utilization is clamped here"""
    return 100 - clamp(utilization_pct, 0, 100)


def composite_from_factors(factors: Mapping[CreditScoreFactor, float]) -> float:
    """
    Weighted sum of factor sub-scores on the 0-100 scale.

    Weights: payment history 35%, utilization 30%, account age 15%,
    credit mix 10%, new inquiries 10%. Factors absent from the mapping
    contribute 0.
    """
    return sum(
        factors.get(factor, 0) * weight / 100
        for factor, weight in FACTOR_WEIGHTS.items()
    )


def credit_score_range(score: float) -> CreditScoreRange:
    if score >= 800:
        return CreditScoreRange.EXCELLENT
    if score >= 740:
        return CreditScoreRange.VERY_GOOD
    if score >= 670:
        return CreditScoreRange.GOOD
    if score >= 580:
        return CreditScoreRange.FAIR
    return CreditScoreRange.POOR


def business_credit_range(score: float) -> BusinessCreditRange:
    if score >= 80:
        return BusinessCreditRange.EXCELLENT
    if score >= 50:
        return BusinessCreditRange.GOOD
    if score >= 25:
        return BusinessCreditRange.FAIR
    return BusinessCreditRange.POOR


def project_to_credit_score(composite: float) -> int:
    """Linearly map the 0-100 composite onto the 300-850 consumer scale"""
    span = CREDIT_SCORE_MAX - CREDIT_SCORE_MIN
    return round(CREDIT_SCORE_MIN + clamp(composite, 0, 100) / 100 * span)


def build_factor_scores(profile: CreditProfile, today: Optional[date] = None) -> List[FactorScore]:
    """
    Compute every factor the profile carries data for.

    Account age is left out when the profile lists no accounts, so it
    contributes nothing to the composite.
    """
    subscores: Dict[CreditScoreFactor, float] = {
        CreditScoreFactor.PAYMENT_HISTORY: payment_history_score(profile.payment_history),
        CreditScoreFactor.CREDIT_UTILIZATION: utilization_score(
            utilization_percent(profile.total_balance, profile.total_credit_limit)
        ),
        CreditScoreFactor.CREDIT_MIX: credit_mix_score(profile.account_types),
        CreditScoreFactor.NEW_INQUIRIES: inquiry_score(profile.inquiry_count, profile.inquiry_window_months),
    }

    if profile.accounts:
        oldest, newest = date_bounds(account.open_date for account in profile.accounts)
        subscores[CreditScoreFactor.ACCOUNT_AGE] = account_age_score(oldest, newest, today=today)

    return [
        FactorScore(factor=factor, score=subscores[factor], weight=weight)
        for factor, weight in FACTOR_WEIGHTS.items()
        if factor in subscores
    ]


def estimate_from_factors(factors: Iterable[FactorScore]) -> CompositeScoreEstimate:
    factors = tuple(factors)
    composite = composite_from_factors({f.factor: f.score for f in factors})
    score = project_to_credit_score(composite)

    return CompositeScoreEstimate(
        composite=round(composite, 3),
        score=score,
        score_range=credit_score_range(score),
        factors=factors,
    )


def estimate_credit_score(profile: CreditProfile, today: Optional[date] = None) -> CompositeScoreEstimate:
    """
    Main entry point: score every factor and assemble the composite estimate.

    Returns CompositeScoreEstimate with the 0-100 composite, the projected
    300-850 score, its range band, and the factor breakdown.
    """
    return estimate_from_factors(build_factor_scores(profile, today=today))
