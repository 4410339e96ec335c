"""Unit tests for debt payoff strategy simulation"""

import pytest
from credit_analyzer.domain.debt_strategy import (
    calculate_avalanche_payoff,
    calculate_snowball_payoff,
    months_to_payoff,
    order_debts,
    simulate_payoff,
)
from credit_analyzer.domain.exceptions import NonAmortizingDebtError
from credit_analyzer.domain.models import DebtAccount, PaymentStrategy


def test_snowball_orders_by_balance_with_cumulative_months():
    """Test smallest balance first; payoff months accumulate across debts"""
    debts = [
        DebtAccount(balance=1000, monthly_payment=200, interest_rate=0),
        DebtAccount(balance=500, monthly_payment=100, interest_rate=0),
    ]

    plan = calculate_snowball_payoff(debts)

    first, second = plan.payoff_order
    assert first.account.balance == 500
    assert first.payoff_month == 5
    assert second.account.balance == 1000
    assert second.payoff_month == 10  # 5 + 5
    assert second.months_to_payoff == 5

    assert plan.total_payments == 1500
    assert plan.total_interest == 0
    assert plan.months_to_debt_free == 10


def test_avalanche_orders_by_rate():
    """Test highest rate first"""
    debts = [
        DebtAccount(balance=1000, monthly_payment=200, interest_rate=24),
        DebtAccount(balance=500, monthly_payment=100, interest_rate=5),
    ]

    plan = calculate_avalanche_payoff(debts)

    first, second = plan.payoff_order
    assert first.account.interest_rate == 24
    assert first.payoff_month == 6
    assert second.account.interest_rate == 5
    assert second.payoff_month == 12

    # 6 * 200 + 6 * 100 paid against 1500 borrowed
    assert plan.total_payments == 1800
    assert plan.total_interest == pytest.approx(300)


def test_avalanche_reverses_snowball_order():
    """Test the same debts land in opposite order under each strategy"""
    debts = [
        DebtAccount(balance=1000, monthly_payment=200, interest_rate=24),
        DebtAccount(balance=500, monthly_payment=100, interest_rate=5),
    ]

    snowball = [e.account for e in calculate_snowball_payoff(debts).payoff_order]
    avalanche = [e.account for e in calculate_avalanche_payoff(debts).payoff_order]

    assert snowball == list(reversed(avalanche))


def test_ordering_is_stable_for_ties():
    """Test equal keys preserve input order"""
    a = DebtAccount(balance=800, monthly_payment=100, interest_rate=10, name="a")
    b = DebtAccount(balance=800, monthly_payment=50, interest_rate=10, name="b")
    c = DebtAccount(balance=200, monthly_payment=50, interest_rate=10, name="c")

    assert [d.name for d in order_debts([a, b, c], PaymentStrategy.SNOWBALL)] == ["c", "a", "b"]
    assert [d.name for d in order_debts([a, b, c], PaymentStrategy.AVALANCHE)] == ["a", "b", "c"]
    assert [d.name for d in order_debts([b, a, c], PaymentStrategy.AVALANCHE)] == ["b", "a", "c"]


def test_blended_orders_by_priority():
    """Test caller priority ordering, unprioritized debts last"""
    debts = [
        DebtAccount(balance=100, monthly_payment=50, interest_rate=0, name="none"),
        DebtAccount(balance=100, monthly_payment=50, interest_rate=0, name="second", priority=2),
        DebtAccount(balance=100, monthly_payment=50, interest_rate=0, name="first", priority=1),
    ]

    assert [d.name for d in order_debts(debts, PaymentStrategy.BLENDED)] == ["first", "second", "none"]


def test_minimum_payments_months_are_concurrent(household_debts):
    """Test minimum payments reports each debt's own payoff month in input order"""
    plan = simulate_payoff(household_debts, PaymentStrategy.MINIMUM_PAYMENTS)

    assert [e.account.name for e in plan.payoff_order] == ["auto", "card", "personal"]
    for entry in plan.payoff_order:
        assert entry.payoff_month == entry.months_to_payoff
    assert plan.months_to_debt_free == max(e.months_to_payoff for e in plan.payoff_order)


def test_totals_reconcile(household_debts):
    """Test total interest equals total payments minus original balances"""
    plan = calculate_avalanche_payoff(household_debts)

    assert plan.total_payments == pytest.approx(sum(e.total_paid for e in plan.payoff_order))
    assert plan.total_interest == pytest.approx(
        plan.total_payments - sum(d.balance for d in household_debts)
    )
    assert plan.total_interest == pytest.approx(sum(e.total_interest for e in plan.payoff_order))
    assert plan.payoff_order[-1].payoff_month == sum(e.months_to_payoff for e in plan.payoff_order)


def test_simulation_does_not_touch_inputs(household_debts):
    """Test the input list keeps its order and records"""
    before = list(household_debts)
    calculate_snowball_payoff(household_debts)
    assert household_debts == before


def test_zero_balance_debt_takes_no_months():
    """Test an already-cleared debt adds nothing to the schedule"""
    debts = [
        DebtAccount(balance=0, monthly_payment=50, interest_rate=12),
        DebtAccount(balance=300, monthly_payment=100, interest_rate=0),
    ]

    plan = calculate_snowball_payoff(debts)

    assert plan.payoff_order[0].payoff_month == 0
    assert plan.payoff_order[1].payoff_month == 3


def test_empty_debt_list():
    """Test no debts produces an empty plan"""
    plan = calculate_snowball_payoff([])

    assert plan.payoff_order == ()
    assert plan.total_payments == 0
    assert plan.total_interest == 0
    assert plan.months_to_debt_free == 0


def test_payment_below_interest_is_non_amortizing():
    """Test a payment that never covers interest raises instead of looping forever"""
    debt = DebtAccount(balance=10_000, monthly_payment=100, interest_rate=24, name="store card")

    with pytest.raises(NonAmortizingDebtError) as exc_info:
        calculate_snowball_payoff([debt])

    assert exc_info.value.debt is debt
    assert "store card" in str(exc_info.value)


def test_payment_equal_to_interest_is_non_amortizing():
    """Test interest-only payments are flagged"""
    with pytest.raises(NonAmortizingDebtError):
        months_to_payoff(DebtAccount(balance=1200, monthly_payment=12, interest_rate=12))


def test_month_cap_bounds_slow_payoff():
    """Test a payoff longer than the month cap raises within the cap"""
    debt = DebtAccount(balance=1_000_000, monthly_payment=1, interest_rate=0)

    with pytest.raises(NonAmortizingDebtError) as exc_info:
        months_to_payoff(debt, max_months=120)

    assert exc_info.value.max_months == 120
    # Same debt fits under a larger cap
    assert months_to_payoff(DebtAccount(balance=100, monthly_payment=1, interest_rate=0), max_months=120) == 100


@pytest.mark.parametrize("max_months", [0, -12])
def test_non_positive_month_cap_is_rejected(max_months):
    """Test an explicit zero or negative cap is not replaced by the default"""
    debt = DebtAccount(balance=100, monthly_payment=1, interest_rate=0)

    with pytest.raises(ValueError):
        months_to_payoff(debt, max_months=max_months)
    with pytest.raises(ValueError):
        simulate_payoff([debt], PaymentStrategy.SNOWBALL, max_months=max_months)


def test_strategy_accepts_string_values():
    """Test JSON strategy strings dispatch like enum members"""
    debts = [DebtAccount(balance=400, monthly_payment=100, interest_rate=0)]
    plan = simulate_payoff(debts, "snowball")

    assert plan.strategy == PaymentStrategy.SNOWBALL

    with pytest.raises(ValueError):
        simulate_payoff(debts, "fastest")
