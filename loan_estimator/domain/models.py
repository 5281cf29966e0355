"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum


class RepaymentKind(str, Enum):
    """How the principal is paid back"""

    AMORTIZING = "amortizing"  # fixed EMI, principal reduces every month
    BULLET = "bullet"  # interest-only months, principal at maturity


@dataclass(frozen=True)
class Applicant:
    """Applicant financial profile entered at the console"""

    name: str
    monthly_income: float
    existing_monthly_emi: float
    credit_score: int  # 300-900

    def summary(self) -> str:
        return (
            f"Name: {self.name}\n"
            f"Monthly Income: INR {self.monthly_income:.2f}\n"
            f"Existing EMI: INR {self.existing_monthly_emi:.2f}\n"
            f"Credit Score: {self.credit_score}"
        )


@dataclass(frozen=True)
class EligibilityResult:
    """Output of the eligibility rule"""

    eligible: bool
    reason: str


@dataclass(frozen=True)
class LoanParameters:
    """Loan requested for a single simulation"""

    principal: float
    annual_rate_percent: float
    tenure_years: int
    repayment_kind: RepaymentKind = RepaymentKind.AMORTIZING

    @property
    def months(self) -> int:
        return self.tenure_years * 12

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_percent / 100.0 / 12.0


@dataclass(frozen=True)
class ScheduleRow:
    """Single period in a repayment schedule"""

    period: int
    opening_balance: float
    payment: float
    principal_portion: float
    interest_portion: float
    closing_balance: float


@dataclass(frozen=True)
class ScheduleSummary:
    """Totals over a repayment schedule"""

    periods: int
    total_payment: float
    total_principal: float
    total_interest: float
