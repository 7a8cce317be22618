"""
Pydantic schemas for balance creation and retrieval.

These define the API contract. They are separate from the
database models because the API shape and the storage shape
are often different.
"""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field

from bookkeeper.models.enums import EntryType, RecordingType


# --- Request Schemas ---

class TransactionCreate(BaseModel):
    """A single debit or credit line."""
    entry_type: EntryType
    account_number: str = Field(min_length=1, max_length=20)
    amount: Decimal = Field(ge=0, max_digits=19, decimal_places=4)


class RecordingCreate(BaseModel):
    date: dt.date
    type: RecordingType
    transactions: list[TransactionCreate] = Field(min_length=1)


class GeneralInfo(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    purpose: str = Field(min_length=1)


class BalanceCreate(BaseModel):
    """
    A complete balance: general information plus every recording.

    Total debits must equal total credits across all recordings.
    That rule is checked by BalanceService, not here, so the
    error comes back as a domain ValidationError.
    """
    general_info: GeneralInfo
    recordings: list[RecordingCreate] = Field(min_length=1)


# --- Response Schemas ---

class TransactionResponse(BaseModel):
    id: int
    entry_type: EntryType
    account_number: str
    amount: Decimal

    model_config = {"from_attributes": True}


class RecordingResponse(BaseModel):
    id: int
    date: dt.date
    type: RecordingType
    transactions: list[TransactionResponse]

    model_config = {"from_attributes": True}


class BalanceSummary(BaseModel):
    """General information only, as shown in balance listings."""
    id: int
    name: str
    description: str
    purpose: str
    date: dt.datetime

    model_config = {"from_attributes": True}


class BalanceResponse(BalanceSummary):
    recordings: list[RecordingResponse]
