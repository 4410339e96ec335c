"""Debt payoff strategies - Snowball, Avalanche and friends"""

from typing import List, Optional, Sequence

from credit_analyzer.config import settings
from credit_analyzer.domain.amortization import monthly_rate
from credit_analyzer.domain.exceptions import NonAmortizingDebtError
from credit_analyzer.domain.models import (
    DebtAccount,
    PaymentStrategy,
    PayoffPlan,
    PayoffScheduleEntry,
)


def order_debts(debts: Sequence[DebtAccount], strategy: PaymentStrategy) -> List[DebtAccount]:
    """
    Order debts for payoff. All orderings are stable: equal keys keep input order.

    - snowball: ascending balance
    - avalanche: descending interest rate
    - blended: ascending caller priority, debts without one last
    - minimum_payments: input order
    """
    strategy = PaymentStrategy(strategy)

    if strategy == PaymentStrategy.SNOWBALL:
        return sorted(debts, key=lambda d: d.balance)
    if strategy == PaymentStrategy.AVALANCHE:
        return sorted(debts, key=lambda d: -d.interest_rate)
    if strategy == PaymentStrategy.BLENDED:
        return sorted(debts, key=lambda d: (d.priority is None, d.priority or 0))
    return list(debts)


def months_to_payoff(debt: DebtAccount, max_months: Optional[int] = None) -> int:
    """
    Simulate monthly compounding and a fixed payment until the balance is <= 0.

    Raises:
        NonAmortizingDebtError: payment never exceeds the monthly interest, or
            the debt is still open after `max_months`
        ValueError: `max_months` is not positive
    """
    if max_months is None:
        max_months = settings.max_payoff_months
    if max_months <= 0:
        raise ValueError(f"max_months must be positive, got {max_months}")
    rate = monthly_rate(debt.interest_rate)
    balance = debt.balance

    # Payment that cannot beat the first month's interest never will
    if balance > 0 and debt.monthly_payment <= balance * rate:
        raise NonAmortizingDebtError(debt, max_months)

    months = 0
    while balance > 0:
        if months >= max_months:
            raise NonAmortizingDebtError(debt, max_months)
        balance = balance * (1 + rate) - debt.monthly_payment
        months += 1

    return months


def simulate_payoff(
    debts: Sequence[DebtAccount],
    strategy: PaymentStrategy,
    max_months: Optional[int] = None,
) -> PayoffPlan:
    """
    Simulate paying off `debts` in strategy order.

    Sequential strategies pay one debt at a time, so each payoff month is
    cumulative: debt N starts after debt N-1 is cleared. Minimum payments pays
    every debt concurrently and reports each debt's own month count.

    total_interest = total payments - sum of original balances.
    """
    strategy = PaymentStrategy(strategy)
    cumulative = strategy != PaymentStrategy.MINIMUM_PAYMENTS

    elapsed = 0
    total_payments = 0.0
    payoff_order = []

    for debt in order_debts(debts, strategy):
        months = months_to_payoff(debt, max_months)
        paid = debt.monthly_payment * months

        if cumulative:
            elapsed += months
            payoff_month = elapsed
        else:
            payoff_month = months

        payoff_order.append(
            PayoffScheduleEntry(
                account=debt,
                payoff_month=payoff_month,
                months_to_payoff=months,
                total_paid=paid,
                total_interest=paid - debt.balance,
            )
        )
        total_payments += paid

    return PayoffPlan(
        strategy=strategy,
        total_payments=total_payments,
        total_interest=total_payments - sum(debt.balance for debt in debts),
        payoff_order=tuple(payoff_order),
    )


def calculate_snowball_payoff(debts: Sequence[DebtAccount], max_months: Optional[int] = None) -> PayoffPlan:
    """Smallest balance first"""
    return simulate_payoff(debts, PaymentStrategy.SNOWBALL, max_months)


def calculate_avalanche_payoff(debts: Sequence[DebtAccount], max_months: Optional[int] = None) -> PayoffPlan:
    """Highest interest rate first"""
    return simulate_payoff(debts, PaymentStrategy.AVALANCHE, max_months)

