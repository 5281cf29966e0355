"""Structured JSON logging, kept on stderr so stdout stays with the interactive session"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from loan_estimator.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "WARNING") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_eligibility(applicant_name: str, credit_score: int, eligible: bool, reason: str) -> None:
    """Log structured eligibility outcome"""
    logging.info(
        "Eligibility checked",
        extra={
            "applicant": applicant_name,
            "step": "eligibility",
            "credit_score": credit_score,
            "outcome": "eligible" if eligible else "ineligible",
            "reason": reason,
        },
    )


def log_simulation(
    applicant_name: str,
    repayment_kind: str,
    principal: float,
    annual_rate_percent: float,
    tenure_years: int,
    monthly_payment: float,
) -> None:
    """Log structured simulation outcome for later analysis"""
    logging.info(
        "Simulation completed",
        extra={
            "applicant": applicant_name,
            "step": "simulation_complete",
            "repayment_kind": repayment_kind,
            "principal": principal,
            "annual_rate_percent": annual_rate_percent,
            "tenure_years": tenure_years,
            "monthly_payment": round(monthly_payment, 2),
        },
    )
