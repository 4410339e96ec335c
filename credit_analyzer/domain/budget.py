"""Household budget ratios"""

# Recommended ceilings and targets, in percent
MAX_DEBT_TO_INCOME_RATIO = 43
RECOMMENDED_SAVINGS_RATE = 20
EMERGENCY_FUND_MONTHS = 6


def debt_to_income_ratio(monthly_debt_payments: float, monthly_income: float) -> float:
    if monthly_income == 0:
        return 0
    return monthly_debt_payments / monthly_income * 100


def savings_rate(monthly_savings: float, monthly_income: float) -> float:
    if monthly_income == 0:
        return 0
    return monthly_savings / monthly_income * 100


def net_worth(assets: float, liabilities: float) -> float:
    return assets - liabilities


def exceeds_recommended_dti(ratio: float) -> bool:
    return ratio > MAX_DEBT_TO_INCOME_RATIO


def meets_recommended_savings_rate(rate: float) -> bool:
    return rate >= RECOMMENDED_SAVINGS_RATE


def emergency_fund_target(monthly_expenses: float, months: int = EMERGENCY_FUND_MONTHS) -> float:
    return monthly_expenses * months
