"""Console entry point"""

import click
from rich.console import Console

from loan_estimator.cli.prompts import Prompter
from loan_estimator.cli.session import run_session
from loan_estimator.config import settings
from loan_estimator.domain.exceptions import InputAttemptsExceededError
from loan_estimator.infrastructure.observability.logging import setup_logging


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
def main() -> None:
    """Interactive personal loan eligibility check and repayment calculator.

    Schedules are written to LOAN_ESTIMATOR_OUTPUT_DIR (default: current directory).
    """
    setup_logging(settings.log_level)

    # Soft wrap keeps long paths and reasons on one line
    console = Console(soft_wrap=True, highlight=False)
    prompter = Prompter(console, max_attempts=settings.max_input_attempts)

    console.print("=== Loan Automation System (Console) ===\n")
    try:
        run_session(prompter, settings)
    except InputAttemptsExceededError as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
