"""Rich rendering of menus, verdicts and schedule summaries"""

from rich import box
from rich.console import Console
from rich.table import Table

from loan_estimator.domain.models import Applicant, EligibilityResult, ScheduleSummary
from loan_estimator.utils.formatting import format_amount

MENU_OPTIONS = (
    ("1", "Enter applicant data"),
    ("2", "Check eligibility & simulate loan"),
    ("3", "Exit"),
)


def print_menu(console: Console) -> None:
    console.print("Menu:")
    for key, label in MENU_OPTIONS:
        console.print(f"{key}) {label}", markup=False)


def print_applicant(console: Console, applicant: Applicant) -> None:
    console.print("\n-- Applicant summary --")
    # Name is user input, never markup
    console.print(applicant.summary(), markup=False)


def print_verdict(console: Console, result: EligibilityResult) -> None:
    verdict = "[green]ELIGIBLE[/green]" if result.eligible else "[red]NOT ELIGIBLE[/red]"
    console.print(f"\nEligibility: {verdict}")
    console.print(f"Reason: {result.reason}", markup=False)


def print_schedule_summary(console: Console, summary: ScheduleSummary) -> None:
    t = Table(title="Schedule Summary", box=box.SIMPLE, show_header=False, padding=(0, 2))
    t.add_column("Field", style="cyan")
    t.add_column("Value", justify="right")

    t.add_row("Installments", str(summary.periods))
    t.add_row("Total paid", format_amount(summary.total_payment))
    t.add_row("  principal", format_amount(summary.total_principal))
    t.add_row("  interest", format_amount(summary.total_interest))
    console.print(t)
