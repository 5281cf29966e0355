"""Console prompts with re-prompt-until-valid input loops"""

import logging
from typing import Optional, TextIO

from pydantic import TypeAdapter, ValidationError
from rich.console import Console

from loan_estimator.cli.schemas import (
    CREDIT_SCORE_MAX,
    CREDIT_SCORE_MIN,
    int_in_range,
    non_negative_amount,
    positive_amount,
    positive_count,
)
from loan_estimator.domain.exceptions import InputAttemptsExceededError

logger = logging.getLogger(__name__)


class Prompter:
    """
    Reads answers from the console.

    Numeric questions repeat until the answer satisfies the field's
    constraint. With max_attempts unset that loop never gives up; otherwise
    InputAttemptsExceededError is raised once the limit is reached.

    Args:
        console: Rich console used for prompts and echoing
        stream: Read answers from this file instead of stdin
        max_attempts: Answers allowed per question before giving up
    """

    def __init__(self, console: Console, stream: Optional[TextIO] = None, max_attempts: Optional[int] = None):
        self.console = console
        self.stream = stream
        self.max_attempts = max_attempts

    def ask(self, prompt: str) -> str:
        """Single free-text answer, stripped. Raises EOFError when input is exhausted."""
        raw = self.console.input(f"[bold]{prompt}[/bold] ", stream=self.stream)
        if self.stream is not None and raw == "":
            raise EOFError
        return raw.strip()

    def confirm(self, prompt: str) -> bool:
        """Yes unless the answer is 'n'"""
        return self.ask(prompt).lower() != "n"

    def ask_non_negative(self, prompt: str) -> float:
        return self._ask_validated(prompt, non_negative_amount, "Enter a valid non-negative number:")

    def ask_positive(self, prompt: str) -> float:
        return self._ask_validated(prompt, positive_amount, "Please enter a positive number:")

    def ask_positive_int(self, prompt: str) -> int:
        return self._ask_validated(prompt, positive_count, "Please enter a positive integer:")

    def ask_int_in_range(self, prompt: str, low: int, high: int) -> int:
        return self._ask_validated(prompt, int_in_range(low, high), f"Enter a number between {low} and {high}:")

    def ask_credit_score(self) -> int:
        return self.ask_int_in_range(
            f"Credit score ({CREDIT_SCORE_MIN} - {CREDIT_SCORE_MAX}):", CREDIT_SCORE_MIN, CREDIT_SCORE_MAX
        )

    def _ask_validated(self, prompt: str, adapter: TypeAdapter, retry_prompt: str):
        raw = self.ask(prompt)
        attempts = 1
        while True:
            try:
                return adapter.validate_python(raw)
            except ValidationError as e:
                logger.debug("Answer rejected", extra={"prompt": prompt, "errors": e.error_count()})

            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise InputAttemptsExceededError(
                    f"No valid answer to '{prompt}' after {attempts} attempts"
                )

            raw = self.ask(retry_prompt)
            attempts += 1
