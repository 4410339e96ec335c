"""What-if credit simulations - rescore a profile after a hypothetical action"""

from dataclasses import replace
from datetime import date
from typing import Optional, Union

from credit_analyzer.domain.models import (
    FACTOR_WEIGHTS,
    AccountSpan,
    CloseAccount,
    CompositeScoreEstimate,
    CreditProfile,
    CreditSimulationResult,
    IncreaseCreditLimit,
    OpenNewAccount,
    PaymentStatus,
    PayOffDebt,
    RemoveDerogatory,
    SimulationFactorImpact,
)
from credit_analyzer.domain.scoring import PAYMENT_STATUS_PENALTIES, estimate_credit_score

CreditAction = Union[PayOffDebt, IncreaseCreditLimit, RemoveDerogatory, OpenNewAccount, CloseAccount]


def _remove_derogatory(history, status: Optional[PaymentStatus]):
    history = [PaymentStatus(s) for s in history]
    if status is not None:
        target = PaymentStatus(status)
        if target in history:
            history.remove(target)
        return tuple(history)

    if not history:
        return ()
    worst = min(history, key=lambda s: PAYMENT_STATUS_PENALTIES[s])
    if PAYMENT_STATUS_PENALTIES[worst] < 0:
        history.remove(worst)
    return tuple(history)


def apply_action(profile: CreditProfile, action: CreditAction, today: Optional[date] = None) -> CreditProfile:
    """Return a new profile with the action applied; the input profile is untouched"""
    if isinstance(action, PayOffDebt):
        return replace(profile, total_balance=max(profile.total_balance - action.amount, 0.0))

    if isinstance(action, IncreaseCreditLimit):
        return replace(profile, total_credit_limit=profile.total_credit_limit + action.amount)

    if isinstance(action, RemoveDerogatory):
        return replace(profile, payment_history=_remove_derogatory(profile.payment_history, action.status))

    if isinstance(action, OpenNewAccount):
        opened = action.open_date or today or date.today()
        return replace(
            profile,
            accounts=profile.accounts + (AccountSpan(open_date=opened, last_activity_date=opened),),
            account_types=profile.account_types + (action.account_type,),
            total_credit_limit=profile.total_credit_limit + action.credit_limit,
            inquiry_count=profile.inquiry_count + 1,
        )

    if isinstance(action, CloseAccount):
        # Closed accounts keep their history, so account age is unchanged
        account_types = list(profile.account_types)
        if action.account_type in account_types:
            account_types.remove(action.account_type)
        return replace(
            profile,
            account_types=tuple(account_types),
            total_credit_limit=max(profile.total_credit_limit - action.credit_limit, 0.0),
        )

    raise TypeError(f"Unsupported credit action: {type(action).__name__}")


def _impact(estimate: CompositeScoreEstimate, factor) -> float:
    score = estimate.factor(factor)
    return score.weighted if score else 0.0


def simulate_credit_action(
    profile: CreditProfile,
    action: CreditAction,
    today: Optional[date] = None,
) -> CreditSimulationResult:
    """
    Score the profile before and after a hypothetical action.

    Returns CreditSimulationResult with both estimates and the weighted
    contribution of every factor on each side.
    """
    current = estimate_credit_score(profile, today=today)
    projected = estimate_credit_score(apply_action(profile, action, today=today), today=today)

    factors = tuple(
        SimulationFactorImpact(
            factor=factor,
            current_impact=_impact(current, factor),
            projected_impact=_impact(projected, factor),
        )
        for factor in FACTOR_WEIGHTS
    )

    return CreditSimulationResult(
        simulation_type=action.simulation_type,
        current=current,
        projected=projected,
        factors=factors,
    )
