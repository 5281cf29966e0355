"""Interactive session: menu loop and the transitions it dispatches to"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from loan_estimator.cli.display import print_applicant, print_menu, print_schedule_summary, print_verdict
from loan_estimator.cli.prompts import Prompter
from loan_estimator.config import Settings
from loan_estimator.domain.eligibility import check_eligibility, suggest_rate
from loan_estimator.domain.exceptions import InvalidLoanParametersError, ScheduleExportError
from loan_estimator.domain.installments import (
    calculate_emi,
    generate_schedule,
    interest_only_payment,
    summarize_schedule,
)
from loan_estimator.domain.models import Applicant, LoanParameters, RepaymentKind
from loan_estimator.infrastructure.export.schedule_csv import destination_for, export_schedule
from loan_estimator.infrastructure.observability.logging import log_eligibility, log_simulation
from loan_estimator.utils.formatting import format_amount, format_rate

logger = logging.getLogger(__name__)

ENTER_APPLICANT = "1"
SIMULATE = "2"
EXIT = "3"


@dataclass(frozen=True)
class SessionState:
    """Everything the session remembers between menu choices"""

    applicant: Optional[Applicant] = None
    finished: bool = False


def enter_applicant(state: SessionState, prompter: Prompter) -> SessionState:
    """Prompt for applicant data, replacing any stored applicant"""
    name = prompter.ask("Full name:")
    income = prompter.ask_non_negative("Monthly gross income (INR):")
    existing_emi = prompter.ask_non_negative("Existing monthly EMI obligations (INR):")
    credit_score = prompter.ask_credit_score()

    applicant = Applicant(
        name=name,
        monthly_income=income,
        existing_monthly_emi=existing_emi,
        credit_score=credit_score,
    )
    prompter.console.print("Applicant saved.\n")
    return replace(state, applicant=applicant)


def ensure_applicant(state: SessionState, prompter: Prompter) -> SessionState:
    if state.applicant is None:
        prompter.console.print("No stored applicant found. Please enter applicant data first.")
        return enter_applicant(state, prompter)
    return state


def simulate(state: SessionState, prompter: Prompter, config: Settings) -> SessionState:
    """
    Check eligibility and, if eligible, simulate a loan for the stored applicant.

    Flow:
    1. Make sure an applicant is stored
    2. Apply the eligibility rule; stop if ineligible
    3. Collect principal and tenure, suggest a rate (user may override)
    4. Show EMI or interest-only figures
    5. Optionally generate the schedule and export it as CSV
    """
    console = prompter.console
    state = ensure_applicant(state, prompter)
    applicant = state.applicant

    print_applicant(console, applicant)

    result = check_eligibility(applicant)
    log_eligibility(applicant.name, applicant.credit_score, result.eligible, result.reason)
    print_verdict(console, result)

    if not result.eligible:
        console.print("Cannot simulate loan since applicant is not eligible.\n")
        return state

    principal = prompter.ask_positive("Enter desired loan amount (principal) in INR:")
    tenure_years = prompter.ask_positive_int("Enter tenure in years:")

    suggested_rate = suggest_rate(applicant.credit_score, tenure_years)
    console.print(f"Suggested annual interest rate: {format_rate(suggested_rate)} per annum")

    if prompter.confirm("Accept suggested rate? (Y/n):"):
        annual_rate = suggested_rate
    else:
        annual_rate = prompter.ask_positive("Enter annual interest rate (%) to use:")

    choice = prompter.ask("Choose repayment type - 1) EMI (fixed)  2) Bullet (interest only with principal at end):")
    kind = RepaymentKind.BULLET if choice == "2" else RepaymentKind.AMORTIZING

    loan = LoanParameters(
        principal=principal,
        annual_rate_percent=annual_rate,
        tenure_years=tenure_years,
        repayment_kind=kind,
    )

    if kind == RepaymentKind.AMORTIZING:
        try:
            monthly_payment = calculate_emi(loan.principal, loan.annual_rate_percent, loan.tenure_years)
        except InvalidLoanParametersError as e:
            logger.warning(f"Installment not computable: {e}", extra={"applicant": applicant.name})
            console.print(f"Cannot compute repayment: {e}", markup=False)
            console.print("Returning to menu.\n")
            return state
        console.print(f"\nEstimated monthly EMI: {format_amount(monthly_payment)}")
        console.print(f"Total payment (principal + interest): {format_amount(monthly_payment * loan.months)}")
        schedule_label = "amortization"
    else:
        monthly_payment = interest_only_payment(loan.principal, loan.annual_rate_percent)
        console.print(f"\nInterest-only monthly payment: {format_amount(monthly_payment)}")
        console.print(f"Principal due at end of tenure: {format_amount(loan.principal)}")
        schedule_label = "payment"

    log_simulation(
        applicant.name,
        kind.value,
        loan.principal,
        loan.annual_rate_percent,
        loan.tenure_years,
        monthly_payment,
    )

    if prompter.confirm(f"Generate and save {schedule_label} schedule to CSV? (Y/n):"):
        _export(prompter, loan, config)

    console.print("\nSimulation done.\n")
    return state


def _export(prompter: Prompter, loan: LoanParameters, config: Settings) -> None:
    console = prompter.console
    rows = generate_schedule(loan)
    destination = destination_for(loan.repayment_kind, config)

    try:
        path = export_schedule(rows, destination)
    except ScheduleExportError as e:
        logger.warning(f"Schedule export failed: {e}", extra={"destination": str(e.destination)})
        console.print(f"Failed to write CSV: {e.reason}", markup=False)
        return

    console.print(f"Schedule saved to: {path}", markup=False)
    print_schedule_summary(console, summarize_schedule(rows))


def handle_choice(state: SessionState, choice: str, prompter: Prompter, config: Settings) -> SessionState:
    """Dispatch one menu choice and return the resulting state"""
    if choice == ENTER_APPLICANT:
        return enter_applicant(state, prompter)
    if choice == SIMULATE:
        return simulate(state, prompter, config)
    if choice == EXIT:
        prompter.console.print("Goodbye!")
        return replace(state, finished=True)

    prompter.console.print("Invalid option. Try again.\n")
    return state


def run_session(prompter: Prompter, config: Settings, state: Optional[SessionState] = None) -> SessionState:
    """Menu loop until the user exits or input runs out"""
    state = state or SessionState()

    while not state.finished:
        print_menu(prompter.console)
        try:
            choice = prompter.ask("Choose an option:")
            state = handle_choice(state, choice, prompter, config)
        except EOFError:
            prompter.console.print("\nGoodbye!")
            state = replace(state, finished=True)

    return state
