"""CSV export of repayment schedules"""

import logging
from dataclasses import asdict
from pathlib import Path
from typing import Sequence

import pandas as pd

from loan_estimator.config import Settings
from loan_estimator.domain.exceptions import ScheduleExportError
from loan_estimator.domain.models import RepaymentKind, ScheduleRow

logger = logging.getLogger(__name__)

# Column order is part of the file format
COLUMNS = {
    "period": "Installment",
    "opening_balance": "OpeningBalance",
    "payment": "EMI",
    "principal_portion": "PrincipalComponent",
    "interest_portion": "InterestComponent",
    "closing_balance": "ClosingBalance",
}


def destination_for(kind: RepaymentKind, config: Settings) -> Path:
    """File a schedule of the given repayment kind is saved to"""
    filename = config.bullet_filename if kind == RepaymentKind.BULLET else config.amortization_filename
    return Path(config.output_dir) / filename


def schedule_to_frame(rows: Sequence[ScheduleRow]) -> pd.DataFrame:
    """Tabulate schedule rows under the exported column names"""
    frame = pd.DataFrame([asdict(row) for row in rows], columns=list(COLUMNS))
    return frame.rename(columns=COLUMNS)


def export_schedule(rows: Sequence[ScheduleRow], destination: Path) -> Path:
    """
    Write the schedule as comma-separated text.

    Amounts are written with 2 decimals and a period as decimal separator
    whatever the host locale; the installment number stays an integer.

    Raises:
        ScheduleExportError: destination could not be written
    """
    destination = Path(destination)
    frame = schedule_to_frame(rows)

    try:
        frame.to_csv(destination, index=False, float_format="%.2f", lineterminator="\n")
    except OSError as e:
        raise ScheduleExportError(destination, e.strerror or str(e)) from e

    logger.info("Schedule exported", extra={"destination": str(destination), "rows": len(frame)})
    return destination


def read_schedule(source: Path) -> pd.DataFrame:
    """Load a previously exported schedule"""
    return pd.read_csv(source)
