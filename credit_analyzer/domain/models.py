"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Tuple

from credit_analyzer.domain.exceptions import InvalidAccountDataError


class PaymentStatus(str, Enum):
    """Reported status of a single tradeline payment"""

    CURRENT = "current"
    LATE_30_DAYS = "late_30_days"
    LATE_60_DAYS = "late_60_days"
    LATE_90_DAYS = "late_90_days"
    COLLECTION = "collection"
    CHARGE_OFF = "charge_off"


class CreditScoreFactor(str, Enum):
    PAYMENT_HISTORY = "payment_history"
    CREDIT_UTILIZATION = "credit_utilization"
    ACCOUNT_AGE = "account_age"
    CREDIT_MIX = "credit_mix"
    NEW_INQUIRIES = "new_inquiries"


class CreditScoreRange(str, Enum):
    EXCELLENT = "excellent"  # 800-850
    VERY_GOOD = "very_good"  # 740-799
    GOOD = "good"  # 670-739
    FAIR = "fair"  # 580-669
    POOR = "poor"  # 300-579


class BusinessCreditRange(str, Enum):
    EXCELLENT = "excellent"  # 80-100
    GOOD = "good"  # 50-79
    FAIR = "fair"  # 25-49
    POOR = "poor"  # 0-24


class PaymentStrategy(str, Enum):
    SNOWBALL = "snowball"  # Smallest balance first
    AVALANCHE = "avalanche"  # Highest interest first
    BLENDED = "blended"  # Caller-assigned priority
    MINIMUM_PAYMENTS = "minimum_payments"  # All debts paid concurrently


class SimulationType(str, Enum):
    PAY_OFF_DEBT = "pay_off_debt"
    OPEN_NEW_ACCOUNT = "open_new_account"
    CLOSE_ACCOUNT = "close_account"
    REMOVE_DEROGATORY = "remove_derogatory"
    INCREASE_CREDIT_LIMIT = "increase_credit_limit"


# Fixed factor weights (percent, sums to 100)
FACTOR_WEIGHTS = {
    CreditScoreFactor.PAYMENT_HISTORY: 35,
    CreditScoreFactor.CREDIT_UTILIZATION: 30,
    CreditScoreFactor.ACCOUNT_AGE: 15,
    CreditScoreFactor.CREDIT_MIX: 10,
    CreditScoreFactor.NEW_INQUIRIES: 10,
}


@dataclass(frozen=True)
class PaymentHistoryEntry:
    """Payment status reported at a point in time"""

    status: PaymentStatus
    reported_on: Optional[date] = None


@dataclass(frozen=True)
class AccountSpan:
    """Open and last-activity dates of a tradeline"""

    open_date: date
    last_activity_date: date

    def __post_init__(self):
        if self.open_date > self.last_activity_date:
            raise InvalidAccountDataError(
                f"open_date {self.open_date} is after last_activity_date {self.last_activity_date}"
            )


@dataclass(frozen=True)
class DebtAccount:
    """Debt used as payoff simulation input (balance and payment in dollars, rate in annual percent)"""

    balance: float
    monthly_payment: float
    interest_rate: float
    name: Optional[str] = None
    priority: Optional[int] = None  # blended strategy only; lower pays first


@dataclass(frozen=True)
class FactorScore:
    """Sub-score for one credit score factor"""

    factor: CreditScoreFactor
    score: float  # 0-100
    weight: int

    @property
    def weighted(self) -> float:
        """Contribution of this factor to the 0-100 composite"""
        return self.score * self.weight / 100


@dataclass(frozen=True)
class PayoffScheduleEntry:
    """Payoff outcome for a single debt within a strategy run"""

    account: DebtAccount
    payoff_month: int  # cumulative for sequential strategies
    months_to_payoff: int
    total_paid: float
    total_interest: float


@dataclass(frozen=True)
class PayoffPlan:
    """Output of a debt strategy simulation"""

    strategy: PaymentStrategy
    total_payments: float
    total_interest: float
    payoff_order: Tuple[PayoffScheduleEntry, ...]

    @property
    def months_to_debt_free(self) -> int:
        return max((entry.payoff_month for entry in self.payoff_order), default=0)


@dataclass(frozen=True)
class CreditProfile:
    """Raw credit data a composite score estimate is built from"""

    payment_history: Tuple[PaymentStatus, ...] = ()
    accounts: Tuple[AccountSpan, ...] = ()
    account_types: Tuple[str, ...] = ()
    inquiry_count: int = 0
    inquiry_window_months: int = 12
    total_balance: float = 0.0
    total_credit_limit: float = 0.0


@dataclass(frozen=True)
class CompositeScoreEstimate:
    """Weighted factor composite and its projection onto the 300-850 scale"""

    composite: float  # 0-100
    score: int  # 300-850
    score_range: CreditScoreRange
    factors: Tuple[FactorScore, ...]

    def factor(self, kind: CreditScoreFactor) -> Optional[FactorScore]:
        return next((f for f in self.factors if f.factor == kind), None)


# What-if actions


@dataclass(frozen=True)
class PayOffDebt:
    amount: float

    simulation_type = SimulationType.PAY_OFF_DEBT


@dataclass(frozen=True)
class IncreaseCreditLimit:
    amount: float

    simulation_type = SimulationType.INCREASE_CREDIT_LIMIT


@dataclass(frozen=True)
class RemoveDerogatory:
    status: Optional[PaymentStatus] = None  # None removes the worst entry

    simulation_type = SimulationType.REMOVE_DEROGATORY


@dataclass(frozen=True)
class OpenNewAccount:
    account_type: str
    credit_limit: float = 0.0
    open_date: Optional[date] = None  # defaults to the simulation date

    simulation_type = SimulationType.OPEN_NEW_ACCOUNT


@dataclass(frozen=True)
class CloseAccount:
    account_type: str
    credit_limit: float = 0.0  # limit that stops counting toward utilization

    simulation_type = SimulationType.CLOSE_ACCOUNT


@dataclass(frozen=True)
class SimulationFactorImpact:
    """Weighted contribution of a factor before and after a what-if action"""

    factor: CreditScoreFactor
    current_impact: float
    projected_impact: float

    @property
    def change(self) -> float:
        return self.projected_impact - self.current_impact


@dataclass(frozen=True)
class CreditSimulationResult:
    simulation_type: SimulationType
    current: CompositeScoreEstimate
    projected: CompositeScoreEstimate
    factors: Tuple[SimulationFactorImpact, ...]

    @property
    def score_change(self) -> int:
        return self.projected.score - self.current.score
