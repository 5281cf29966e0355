"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidLoanParametersError(DomainException):
    """Loan figures outside the range the repayment formulas accept"""

    pass


class ScheduleExportError(DomainException):
    """Repayment schedule could not be written to its destination"""

    def __init__(self, destination, reason: str):
        super().__init__(f"{destination}: {reason}")
        self.destination = destination
        self.reason = reason


class InputAttemptsExceededError(DomainException):
    """Prompt gave up after the configured number of invalid answers"""

    pass
