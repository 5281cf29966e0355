"""Repayment schedule generation for amortizing and bullet loans"""

from typing import List, Sequence

from loan_estimator.domain.exceptions import InvalidLoanParametersError
from loan_estimator.domain.models import LoanParameters, RepaymentKind, ScheduleRow, ScheduleSummary

# Closing balances below this are floating-point residue, not debt
BALANCE_EPSILON = 1e-8


def _validate(principal: float, annual_rate_percent: float, tenure_years: int) -> None:
    if principal <= 0:
        raise InvalidLoanParametersError(f"principal must be positive, got {principal}")
    if annual_rate_percent < 0:
        raise InvalidLoanParametersError(f"annual rate must not be negative, got {annual_rate_percent}")
    if tenure_years <= 0:
        raise InvalidLoanParametersError(f"tenure must be at least one year, got {tenure_years}")


def calculate_emi(principal: float, annual_rate_percent: float, tenure_years: int) -> float:
    """
    Fixed monthly installment for a fully amortizing loan.

    EMI = P * r * (1+r)^n / ((1+r)^n - 1)
    where r is the monthly rate (decimal) and n the number of months.
    A zero rate falls back to straight-line repayment P / n.

    Example:
        calculate_emi(100000, 10, 1) -> 8791.59 (r = 0.008333, n = 12)
    """
    _validate(principal, annual_rate_percent, tenure_years)

    monthly_rate = annual_rate_percent / 100.0 / 12.0
    months = tenure_years * 12
    if monthly_rate == 0:
        return principal / months

    try:
        factor = (1 + monthly_rate) ** months
    except OverflowError as e:
        raise InvalidLoanParametersError(
            f"{annual_rate_percent}% over {tenure_years} years is too large to compute an installment"
        ) from e
    return principal * monthly_rate * factor / (factor - 1)


def interest_only_payment(principal: float, annual_rate_percent: float) -> float:
    """Monthly interest on an untouched principal (bullet repayment)"""
    return principal * (annual_rate_percent / 100.0) / 12.0


def generate_amortization_schedule(loan: LoanParameters) -> List[ScheduleRow]:
    """
    Month-by-month ledger for equal-installment repayment.

    Each month: interest accrues on the opening balance, the rest of the EMI
    reduces principal. A closing balance below 1e-8 is clamped to zero so the
    last row closes the loan exactly.
    """
    emi = calculate_emi(loan.principal, loan.annual_rate_percent, loan.tenure_years)
    monthly_rate = loan.monthly_rate

    rows = []
    balance = loan.principal
    for period in range(1, loan.months + 1):
        interest = balance * monthly_rate
        principal_portion = emi - interest
        closing = balance - principal_portion
        if closing < BALANCE_EPSILON:
            closing = 0.0

        rows.append(
            ScheduleRow(
                period=period,
                opening_balance=balance,
                payment=emi,
                principal_portion=principal_portion,
                interest_portion=interest,
                closing_balance=closing,
            )
        )
        balance = closing

    return rows


def generate_bullet_schedule(loan: LoanParameters) -> List[ScheduleRow]:
    """
    Interest-only months followed by a lump-sum principal payoff.

    Rows 1..n carry the constant monthly interest with the balance untouched;
    row n+1 repays the whole principal and closes the loan.
    """
    _validate(loan.principal, loan.annual_rate_percent, loan.tenure_years)
    monthly_interest = interest_only_payment(loan.principal, loan.annual_rate_percent)

    rows = [
        ScheduleRow(
            period=period,
            opening_balance=loan.principal,
            payment=monthly_interest,
            principal_portion=0.0,
            interest_portion=monthly_interest,
            closing_balance=loan.principal,
        )
        for period in range(1, loan.months + 1)
    ]

    # Maturity: principal due in one payment
    rows.append(
        ScheduleRow(
            period=loan.months + 1,
            opening_balance=loan.principal,
            payment=loan.principal,
            principal_portion=loan.principal,
            interest_portion=0.0,
            closing_balance=0.0,
        )
    )

    return rows


def generate_schedule(loan: LoanParameters) -> List[ScheduleRow]:
    """Main entry point: build the schedule matching the loan's repayment kind"""
    if loan.repayment_kind == RepaymentKind.BULLET:
        return generate_bullet_schedule(loan)
    return generate_amortization_schedule(loan)


def summarize_schedule(rows: Sequence[ScheduleRow]) -> ScheduleSummary:
    """Aggregate what the borrower pays over the life of the loan"""
    return ScheduleSummary(
        periods=len(rows),
        total_payment=sum(row.payment for row in rows),
        total_principal=sum(row.principal_portion for row in rows),
        total_interest=sum(row.interest_portion for row in rows),
    )
