"""Eligibility rule and rate suggestion - core business logic for loan decisions"""

from loan_estimator.domain.models import Applicant, EligibilityResult

MIN_MONTHLY_INCOME = 15_000
MIN_CREDIT_SCORE = 450

# (minimum score, base annual rate %), best tier first
RATE_TIERS = (
    (800, 8.0),
    (700, 9.5),
    (650, 10.5),
    (600, 11.5),
)
FALLBACK_RATE = 13.5

LONG_TENURE_YEARS = 5
VERY_LONG_TENURE_YEARS = 10
TENURE_SURCHARGE = 0.5


def check_eligibility(applicant: Applicant) -> EligibilityResult:
    """
    Apply the fixed lending policy to an applicant.

    Rules, in order:
    - Monthly income below INR 15,000: decline
    - Credit score below 450: decline
    - Otherwise eligible

    Existing EMI obligations are carried on the applicant but not checked
    against the new loan; the approval message only points at it.
    """
    if applicant.monthly_income < MIN_MONTHLY_INCOME:
        return EligibilityResult(
            eligible=False,
            reason=f"Monthly income below minimum required (INR {MIN_MONTHLY_INCOME:,})",
        )

    if applicant.credit_score < MIN_CREDIT_SCORE:
        return EligibilityResult(eligible=False, reason="Credit score too low for lending")

    return EligibilityResult(
        eligible=True,
        reason="Meets basic criteria; confirm debt-to-income at simulation time for the chosen amount/tenure",
    )


def suggest_rate(credit_score: int, tenure_years: int) -> float:
    """
    Suggest an annual interest rate (percent) from credit tier and tenure.

    Flat bands, no interpolation:
    - 800+: 8.0, 700+: 9.5, 650+: 10.5, 600+: 11.5, below: 13.5
    - +0.5 for tenures over 5 years, another +0.5 over 10 years
    """
    base = FALLBACK_RATE
    for min_score, rate in RATE_TIERS:
        if credit_score >= min_score:
            base = rate
            break

    if tenure_years > LONG_TENURE_YEARS:
        base += TENURE_SURCHARGE
    if tenure_years > VERY_LONG_TENURE_YEARS:
        base += TENURE_SURCHARGE

    return base
