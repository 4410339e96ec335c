"""Pytest fixtures for testing"""

import pytest
from datetime import date
from credit_analyzer.domain.models import AccountSpan, CreditProfile, DebtAccount, PaymentStatus


@pytest.fixture
def today() -> date:
    """Pinned clock so account-age scoring is deterministic"""
    return date(2024, 6, 1)


@pytest.fixture
def sample_profile() -> CreditProfile:
    """Fair-to-good profile: one late payment, 40% utilization, 12-year-old oldest account"""
    return CreditProfile(
        payment_history=(
            PaymentStatus.CURRENT,
            PaymentStatus.CURRENT,
            PaymentStatus.LATE_30_DAYS,
            PaymentStatus.CURRENT,
        ),
        accounts=(
            AccountSpan(open_date=date(2012, 6, 1), last_activity_date=date(2024, 5, 1)),
            AccountSpan(open_date=date(2019, 3, 15), last_activity_date=date(2024, 5, 20)),
        ),
        account_types=("credit_card", "auto_loan", "credit_card"),
        inquiry_count=3,
        inquiry_window_months=12,
        total_balance=4000.0,
        total_credit_limit=10000.0,
    )


@pytest.fixture
def household_debts() -> list[DebtAccount]:
    """Three debts with distinct balances and rates"""
    return [
        DebtAccount(balance=5000.0, monthly_payment=250.0, interest_rate=6.0, name="auto"),
        DebtAccount(balance=1200.0, monthly_payment=100.0, interest_rate=22.9, name="card"),
        DebtAccount(balance=3000.0, monthly_payment=150.0, interest_rate=9.5, name="personal"),
    ]
