"""Pydantic types validating console answers before they reach the domain"""

from typing import Annotated

from pydantic import Field, TypeAdapter

NonNegativeAmount = Annotated[float, Field(ge=0, allow_inf_nan=False, description="Zero or more, e.g. existing EMI")]
PositiveAmount = Annotated[float, Field(gt=0, allow_inf_nan=False, description="Principal or annual rate")]
PositiveCount = Annotated[int, Field(gt=0, description="Tenure in years")]

CREDIT_SCORE_MIN = 300
CREDIT_SCORE_MAX = 900

non_negative_amount = TypeAdapter(NonNegativeAmount)
positive_amount = TypeAdapter(PositiveAmount)
positive_count = TypeAdapter(PositiveCount)


def int_in_range(low: int, high: int) -> TypeAdapter:
    """Adapter accepting whole numbers in [low, high]"""
    return TypeAdapter(Annotated[int, Field(ge=low, le=high)])
