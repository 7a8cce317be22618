"""
Shapes of the derived accounting views.

Nothing here is persisted: every view is rebuilt from a
balance's transaction lines on each read. Money is always
Decimal; a blank cell is None, never zero.
"""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field, computed_field

from bookkeeper.models.enums import EntryType
from bookkeeper.schemas.balance import BalanceSummary

ZERO = Decimal("0")


def format_amount(amount: Decimal) -> str:
    """Plain notation without trailing zeros: Decimal("70.0000") -> "70"."""
    normalized = amount.normalize()
    if normalized == normalized.to_integral_value():
        normalized = normalized.quantize(Decimal("1"))
    return format(normalized, "f")


# --- Aggregation ---

class FlatTransaction(BaseModel):
    """One transaction line with its recording context joined in."""
    recording_id: int | None
    date: dt.date
    account_number: str
    account_name: str
    amount: Decimal
    entry_type: EntryType


class AccountTotals(BaseModel):
    """Debit and credit sums of every line posted to one account."""
    account_number: str
    account_name: str
    debit: Decimal = ZERO
    credit: Decimal = ZERO

    @property
    def net(self) -> Decimal:
        return abs(self.debit - self.credit)


class Aggregation(BaseModel):
    transactions: list[FlatTransaction]
    accounts: list[AccountTotals]
    total_debit: Decimal = ZERO
    total_credit: Decimal = ZERO

    @property
    def is_balanced(self) -> bool:
        return self.total_debit == self.total_credit


# --- Recording book ---

class RecordingBookRow(BaseModel):
    recording_id: int | None
    date: dt.date
    account_number: str
    account_name: str
    debit: Decimal | None = None
    credit: Decimal | None = None


class RecordingBook(BaseModel):
    rows: list[RecordingBookRow]
    total_debit: Decimal = ZERO
    total_credit: Decimal = ZERO


# --- Ledger ---

class LedgerAccount(BaseModel):
    """
    T-account view of one account.

    The closing line sits on one side only. Its label names the
    balance it represents: "C.B." (credit balance) is written on
    the debit side, "D.B." (debit balance) on the credit side.
    """
    account_number: str
    short_number: str
    account_name: str
    debit_entries: list[Decimal] = Field(default_factory=list)
    credit_entries: list[Decimal] = Field(default_factory=list)
    closing_side: EntryType | None = None
    closing_label: str | None = None
    closing_amount: Decimal | None = None

    @computed_field
    @property
    def closing_marker(self) -> str | None:
        if self.closing_label is None or self.closing_amount is None:
            return None
        return f"{self.closing_label} {format_amount(self.closing_amount)}"

    @property
    def debit_side_marker(self) -> str | None:
        return self.closing_marker if self.closing_side == EntryType.DEBIT else None

    @property
    def credit_side_marker(self) -> str | None:
        return self.closing_marker if self.closing_side == EntryType.CREDIT else None


# --- Trial balance ---

class TrialBalanceRow(BaseModel):
    account_number: str
    account_name: str
    debit: Decimal | None = None
    credit: Decimal | None = None


class TrialBalance(BaseModel):
    rows: list[TrialBalanceRow]
    total_debit: Decimal = ZERO
    total_credit: Decimal = ZERO

    @computed_field
    @property
    def is_balanced(self) -> bool:
        return self.total_debit == self.total_credit


# --- Financial statements ---

class StatementLine(BaseModel):
    account_number: str
    short_number: str
    account_name: str
    amount: Decimal


class IncomeStatement(BaseModel):
    expenses: list[StatementLine]
    income: list[StatementLine]
    total_expenses: Decimal = ZERO
    total_income: Decimal = ZERO
    profit: Decimal = ZERO


class BalanceSheet(BaseModel):
    fixed_assets: list[StatementLine]
    current_assets: list[StatementLine]
    equity: list[StatementLine]
    other_debts: list[StatementLine]
    profit: Decimal = ZERO
    total_assets: Decimal = ZERO
    total_liabilities: Decimal = ZERO

    @computed_field
    @property
    def is_balanced(self) -> bool:
        return self.total_assets == self.total_liabilities


class FinancialStatements(BaseModel):
    income_statement: IncomeStatement
    balance_sheet: BalanceSheet


# --- Everything for one balance ---

class BalanceReport(BaseModel):
    balance: BalanceSummary
    recording_book: RecordingBook
    ledger: list[LedgerAccount]
    trial_balance: TrialBalance
    statements: FinancialStatements
    total_debit: Decimal = ZERO
    total_credit: Decimal = ZERO

    @computed_field
    @property
    def is_balanced(self) -> bool:
        return self.total_debit == self.total_credit
