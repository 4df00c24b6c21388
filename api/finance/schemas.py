"""
Finance API schemas.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

TransactionType = Literal["income", "expense"]

# finance.amount is NUMERIC(12, 2).
AMOUNT_DECIMAL_PLACES = 2
MAX_ABS_AMOUNT = 10**10


class CreateFinanceRecordRequest(BaseModel):
    # Unknown fields are kept so the create response echoes the full body.
    model_config = ConfigDict(extra="allow")

    description: str = Field(..., min_length=1, max_length=500)
    amount: float = Field(..., allow_inf_nan=False, gt=-MAX_ABS_AMOUNT, lt=MAX_ABS_AMOUNT)
    type: TransactionType
    category: str = Field(..., max_length=100)
    user_id: int = 1

    @field_validator("amount")
    @classmethod
    def at_most_two_decimal_places(cls, value: float) -> float:
        exponent = Decimal(str(value)).as_tuple().exponent
        if isinstance(exponent, int) and exponent < -AMOUNT_DECIMAL_PLACES:
            raise ValueError(f"amount must have at most {AMOUNT_DECIMAL_PLACES} decimal places")
        return value


class FinanceRecordResponse(BaseModel):
    id: int
    user_id: int | None = None
    description: str
    amount: float
    type: TransactionType
    category: str
    transaction_date: datetime | None = None
