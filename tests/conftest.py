"""Pytest fixtures for testing"""

import io
import logging
from typing import Callable, Generator

import pytest
from click.testing import CliRunner, Result
from rich.console import Console

import loan_estimator.cli.main as cli_main
from loan_estimator.cli.prompts import Prompter
from loan_estimator.config import Settings
from loan_estimator.domain.models import Applicant, LoanParameters, RepaymentKind
from loan_estimator.infrastructure.observability.logging import CustomJsonFormatter


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """Drop the JSON handler setup_logging() installs so it never outlives a test"""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, CustomJsonFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def good_applicant() -> Applicant:
    """Comfortable income, top credit tier"""
    return Applicant(name="Asha Rao", monthly_income=85000.0, existing_monthly_emi=5000.0, credit_score=810)


@pytest.fixture
def low_income_applicant() -> Applicant:
    return Applicant(name="Ravi Kumar", monthly_income=12000.0, existing_monthly_emi=0.0, credit_score=820)


@pytest.fixture
def low_score_applicant() -> Applicant:
    return Applicant(name="Meera Das", monthly_income=40000.0, existing_monthly_emi=2000.0, credit_score=420)


@pytest.fixture
def amortizing_loan() -> LoanParameters:
    """100k at 10% over one year: EMI 8791.59"""
    return LoanParameters(
        principal=100000.0,
        annual_rate_percent=10.0,
        tenure_years=1,
        repayment_kind=RepaymentKind.AMORTIZING,
    )


@pytest.fixture
def bullet_loan() -> LoanParameters:
    """200k at 12% over two years: 2000 interest a month"""
    return LoanParameters(
        principal=200000.0,
        annual_rate_percent=12.0,
        tenure_years=2,
        repayment_kind=RepaymentKind.BULLET,
    )


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings writing schedules into a per-test directory"""
    return Settings(output_dir=tmp_path)


@pytest.fixture
def make_prompter() -> Callable[..., Prompter]:
    """Build a Prompter reading scripted answers and recording console output"""

    def _make(answers: str, max_attempts=None) -> Prompter:
        console = Console(file=io.StringIO(), soft_wrap=True, highlight=False, width=120)
        return Prompter(console, stream=io.StringIO(answers), max_attempts=max_attempts)

    return _make


@pytest.fixture
def run_cli(monkeypatch, test_settings) -> Callable[..., Result]:
    """Invoke the console command with scripted stdin and test settings"""

    def _run(answers: str, config: Settings = None) -> Result:
        monkeypatch.setattr(cli_main, "settings", config or test_settings)
        return CliRunner().invoke(cli_main.main, input=answers)

    return _run
