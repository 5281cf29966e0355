"""
E2E walkthroughs of whole console sessions for typical applicants.

Applicant personas:
- salaried_prime: strong income and score, amortizing loan accepted as suggested
- investor_bullet: prefers interest-only repayment with principal at maturity
- first_job: income under the minimum, declined
- past_defaulter: adequate income, credit score under the cut-off, declined
- returning: re-enters data after a decline and simulates with the new profile
"""

import pytest

from loan_estimator.infrastructure.export.schedule_csv import read_schedule


@pytest.mark.integration
def test_salaried_prime_amortizing(run_cli, test_settings):
    """
    salaried_prime: 1.2L monthly income, score 790, 5L over 7 years
    Expected: 9.5% tier + 0.5 long-tenure surcharge, 84 installments
    """
    answers = "1\nPriya Nair\n120000\n15000\n790\n" "2\n500000\n7\n\n1\n\n" "3\n"

    result = run_cli(answers)

    assert result.exit_code == 0
    assert "Suggested annual interest rate: 10.00% per annum" in result.output

    schedule = read_schedule(test_settings.output_dir / "amortization_schedule.csv")
    assert len(schedule) == 84
    assert schedule["PrincipalComponent"].sum() == pytest.approx(500000, abs=1.0)
    assert schedule["ClosingBalance"].iloc[-1] == 0


@pytest.mark.integration
def test_investor_bullet(run_cli, test_settings):
    """
    investor_bullet: score 680, 10L over 12 years, interest only
    Expected: 10.5% tier + 1.0 surcharge, 144 interest rows plus payoff
    """
    answers = "1\nKaran Mehta\n300000\n0\n680\n" "2\n1000000\n12\n\n2\n\n" "3\n"

    result = run_cli(answers)

    assert result.exit_code == 0
    assert "Suggested annual interest rate: 11.50% per annum" in result.output
    assert "Principal due at end of tenure: INR 1000000.00" in result.output

    schedule = read_schedule(test_settings.output_dir / "bullet_schedule.csv")
    assert len(schedule) == 145
    assert (schedule["PrincipalComponent"].iloc[:-1] == 0).all()
    assert schedule["PrincipalComponent"].iloc[-1] == 1000000
    assert schedule["EMI"].iloc[0] == pytest.approx(9583.33)


@pytest.mark.integration
def test_first_job_declined(run_cli, test_settings):
    """
    first_job: income 12,000 with a good score
    Expected: decline on income, no loan prompts, no file
    """
    result = run_cli("2\nAnil Verma\n12000\n0\n760\n3\n")

    assert result.exit_code == 0
    assert "No stored applicant found" in result.output
    assert "NOT ELIGIBLE" in result.output
    assert "income below minimum" in result.output.lower()
    assert "Enter desired loan amount" not in result.output
    assert list(test_settings.output_dir.iterdir()) == []


@pytest.mark.integration
def test_past_defaulter_declined(run_cli):
    """
    past_defaulter: income 45,000, score 410
    Expected: decline on credit score
    """
    result = run_cli("1\nSunita Joshi\n45000\n8000\n410\n2\n3\n")

    assert result.exit_code == 0
    assert "NOT ELIGIBLE" in result.output
    assert "Credit score too low" in result.output


@pytest.mark.integration
def test_returning_applicant_overwrites_profile(run_cli, test_settings):
    """
    returning: declined on score, then re-enters an improved profile
    Expected: second simulation uses the new score's rate
    """
    answers = (
        "1\nDev Patel\n50000\n0\n430\n"
        "2\n"
        "1\nDev Patel\n50000\n0\n720\n"
        "2\n300000\n3\n\n1\nn\n"
        "3\n"
    )

    result = run_cli(answers)

    assert result.exit_code == 0
    assert result.output.count("Applicant saved.") == 2
    assert "Credit Score: 720" in result.output
    assert "Suggested annual interest rate: 9.50% per annum" in result.output
    assert not (test_settings.output_dir / "amortization_schedule.csv").exists()
