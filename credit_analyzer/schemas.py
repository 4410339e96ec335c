"""Pydantic schemas for validating engine inputs and serializing results"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from credit_analyzer.domain.models import (
    AccountSpan,
    CompositeScoreEstimate,
    CreditProfile,
    CreditScoreFactor,
    CreditScoreRange,
    DebtAccount,
    PaymentStatus,
    PaymentStrategy,
    PayoffPlan,
)


class DebtAccountSchema(BaseModel):
    """Single debt in a payoff request"""

    name: Optional[str] = None
    balance: float = Field(..., ge=0, allow_inf_nan=False, description="Outstanding balance in dollars")
    monthly_payment: float = Field(..., gt=0, allow_inf_nan=False, description="Fixed monthly payment in dollars")
    interest_rate: float = Field(..., ge=0, le=100, description="Annual interest rate, percent")
    priority: Optional[int] = Field(default=None, ge=0, description="Blended strategy order, lower pays first")

    def to_domain(self) -> DebtAccount:
        return DebtAccount(
            balance=self.balance,
            monthly_payment=self.monthly_payment,
            interest_rate=self.interest_rate,
            name=self.name,
            priority=self.priority,
        )


class PayoffRequest(BaseModel):
    """Request body for a debt payoff plan"""

    debts: List[DebtAccountSchema] = Field(..., min_length=1)
    strategy: PaymentStrategy = PaymentStrategy.SNOWBALL

    def to_domain(self) -> List[DebtAccount]:
        return [debt.to_domain() for debt in self.debts]


class PayoffScheduleItem(BaseModel):
    name: Optional[str] = None
    balance: float
    interest_rate: float
    payoff_month: int
    total_paid: float
    total_interest: float


class PayoffResponse(BaseModel):
    strategy: PaymentStrategy
    total_payments: float
    total_interest: float
    months_to_debt_free: int
    payoff_order: List[PayoffScheduleItem]

    @classmethod
    def from_domain(cls, plan: PayoffPlan) -> "PayoffResponse":
        return cls(
            strategy=plan.strategy,
            total_payments=round(plan.total_payments, 2),
            total_interest=round(plan.total_interest, 2),
            months_to_debt_free=plan.months_to_debt_free,
            payoff_order=[
                PayoffScheduleItem(
                    name=entry.account.name,
                    balance=entry.account.balance,
                    interest_rate=entry.account.interest_rate,
                    payoff_month=entry.payoff_month,
                    total_paid=round(entry.total_paid, 2),
                    total_interest=round(entry.total_interest, 2),
                )
                for entry in plan.payoff_order
            ],
        )


class AccountSpanSchema(BaseModel):
    open_date: date
    last_activity_date: date

    @model_validator(mode="after")
    def check_dates(self):
        if self.open_date > self.last_activity_date:
            raise ValueError("open_date must not be after last_activity_date")
        return self


class CreditProfileSchema(BaseModel):
    """Request body for a composite score estimate"""

    payment_history: List[PaymentStatus] = Field(default_factory=list)
    accounts: List[AccountSpanSchema] = Field(default_factory=list)
    account_types: List[str] = Field(default_factory=list)
    inquiry_count: int = Field(default=0, ge=0)
    inquiry_window_months: int = Field(default=12, ge=0)
    total_balance: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    total_credit_limit: float = Field(default=0.0, ge=0, allow_inf_nan=False)

    def to_domain(self) -> CreditProfile:
        return CreditProfile(
            payment_history=tuple(self.payment_history),
            accounts=tuple(
                AccountSpan(open_date=a.open_date, last_activity_date=a.last_activity_date)
                for a in self.accounts
            ),
            account_types=tuple(self.account_types),
            inquiry_count=self.inquiry_count,
            inquiry_window_months=self.inquiry_window_months,
            total_balance=self.total_balance,
            total_credit_limit=self.total_credit_limit,
        )


class FactorScoreSchema(BaseModel):
    factor: CreditScoreFactor
    score: float = Field(..., ge=0, le=100)
    weight: int


class ScoreEstimateResponse(BaseModel):
    composite: float = Field(..., ge=0, le=100)
    score: int = Field(..., ge=300, le=850)
    score_range: CreditScoreRange
    factors: List[FactorScoreSchema]

    @classmethod
    def from_domain(cls, estimate: CompositeScoreEstimate) -> "ScoreEstimateResponse":
        return cls(
            composite=estimate.composite,
            score=estimate.score,
            score_range=estimate.score_range,
            factors=[
                FactorScoreSchema(factor=f.factor, score=f.score, weight=f.weight)
                for f in estimate.factors
            ],
        )
