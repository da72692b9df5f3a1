"""
Transaction record schema.

Raw records arrive as loosely typed JSON objects with camelCase keys.
``Transaction`` is the typed, frozen form the store works with; it is built with
``Transaction.model_validate(raw)`` so a bad dataset fails at load rather than
on first query.
"""
from __future__ import annotations

import math
from typing import Annotated, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
)

# Integer columns are stored as pandas Int64
Int64 = Annotated[StrictInt, Field(ge=-(2**63), le=2**63 - 1)]


class Transaction(BaseModel):
    """One money transfer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sender_full_name: StrictStr = Field(alias="senderFullName")
    beneficiary_full_name: StrictStr = Field(alias="beneficiaryFullName")
    amount: StrictFloat = Field(alias="amount", allow_inf_nan=False)   # ints accepted, bools not
    issue_id: Optional[Int64] = Field(None, alias="issueId")
    issue_solved: StrictBool = Field(False, alias="issueSolved")       # missing/null → unsolved
    issue_message: Optional[StrictStr] = Field(None, alias="issueMessage")
    mtn: Optional[Int64] = Field(None, alias="mtn")                    # money transfer number
    sender_age: Optional[Int64] = Field(None, alias="senderAge")
    beneficiary_age: Optional[Int64] = Field(None, alias="beneficiaryAge")

    @field_validator("issue_solved", mode="before")
    @classmethod
    def null_is_unsolved(cls, value):
        return False if value is None else value

    @field_validator("amount")
    @classmethod
    def finite_float_amount(cls, value):
        value = float(value)
        if not math.isfinite(value):
            raise ValueError("amount must be a finite number")
        return value
