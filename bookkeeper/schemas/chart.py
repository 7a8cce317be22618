"""
Pydantic schemas for the chart of accounts endpoints.
"""

from pydantic import BaseModel


class ChartAccountResponse(BaseModel):
    account_number: str
    short_number: str
    account_name: str


class ChartClassResponse(BaseModel):
    """One top-level class and the accounts under it."""
    class_digit: str
    class_name: str
    accounts: list[ChartAccountResponse]
