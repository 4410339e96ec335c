"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class NonAmortizingDebtError(DomainException):
    """Scheduled payment never extinguishes the debt within the month cap"""

    def __init__(self, debt, max_months: int):
        self.debt = debt
        self.max_months = max_months
        label = debt.name or f"balance={debt.balance}"
        super().__init__(
            f"Debt ({label}) does not pay off within {max_months} months "
            f"at {debt.monthly_payment}/month and {debt.interest_rate}% APR"
        )


class InvalidRateError(DomainException):
    """Rate or compounding parameters cannot produce a finite result"""

    pass


class InvalidAccountDataError(DomainException):
    """Account data is malformed or inconsistent"""

    pass
