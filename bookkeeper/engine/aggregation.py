"""
Double-entry aggregation.

Turns a balance's recordings into a flat list of transaction
lines and per-account debit/credit totals. Everything here is
a pure function of its input and of the injected chart of
accounts: no database access, no shared state.

Recordings and lines are read by attribute, so ORM objects
(Recording / Transaction) and request schemas (RecordingCreate /
TransactionCreate) both work as input.
"""

import logging
import math
from decimal import Decimal, InvalidOperation
from typing import Iterable, Sequence

from bookkeeper.chart import ChartOfAccounts
from bookkeeper.errors import ValidationError, unbalanced
from bookkeeper.models.enums import EntryType
from bookkeeper.schemas.reports import (
    ZERO,
    AccountTotals,
    Aggregation,
    FlatTransaction,
)

logger = logging.getLogger(__name__)


def coerce_entry_type(value, where: str = "") -> EntryType:
    """Return value as an EntryType, or raise ValidationError."""
    try:
        return EntryType(value)
    except ValueError:
        raise ValidationError(
            f"{where}unknown entry type {value!r}, "
            f"expected DEBIT or CREDIT"
        ) from None


def coerce_amount(value, where: str = "") -> Decimal:
    """
    Return value as a non-negative, finite Decimal.

    Floats go through str() so 0.1 becomes Decimal("0.1")
    rather than its binary expansion.
    """
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{where}amount {value!r} is not a number")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValidationError(f"{where}amount {value!r} is not finite")
        value = str(value)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(
            f"{where}amount {value!r} is not a number"
        ) from None
    if not amount.is_finite():
        raise ValidationError(f"{where}amount {value!r} is not finite")
    if amount < 0:
        raise ValidationError(f"{where}amount {amount} is negative")
    return amount


def _location(recording_index: int, line_index: int) -> str:
    return f"recording {recording_index + 1}, line {line_index + 1}: "


def validate_balanced(transactions: Iterable[FlatTransaction]) -> tuple[Decimal, Decimal]:
    """
    Check that total debits equal total credits.

    Returns (total_debit, total_credit). Raises ValidationError
    when they differ; the comparison is exact.
    """
    total_debit, total_credit = totals(transactions)
    if total_debit != total_credit:
        raise ValidationError(unbalanced(total_debit, total_credit))
    return total_debit, total_credit


def totals(transactions: Iterable[FlatTransaction]) -> tuple[Decimal, Decimal]:
    total_debit = ZERO
    total_credit = ZERO
    for line in transactions:
        if line.entry_type == EntryType.DEBIT:
            total_debit += line.amount
        else:
            total_credit += line.amount
    return total_debit, total_credit


class AggregationEngine:
    """
    Flattens recordings and sums them per account.

    The chart of accounts is passed in rather than looked up
    globally, so tests can use a small fixture chart.
    """

    def __init__(self, chart: ChartOfAccounts):
        self.chart = chart

    def flatten(self, recordings: Sequence) -> list[FlatTransaction]:
        """
        Flat-map every recording's lines, in recording order then
        line order, joining in the account name.

        Raises ValidationError on an unknown entry type or a bad
        amount. An account number missing from the chart is not
        an error: its name is "".
        """
        flat = []
        for r_index, recording in enumerate(recordings):
            recording_id = getattr(recording, "id", None)
            for t_index, line in enumerate(recording.transactions):
                where = _location(r_index, t_index)
                entry_type = coerce_entry_type(line.entry_type, where)
                amount = coerce_amount(line.amount, where)
                account_number = str(line.account_number)
                flat.append(FlatTransaction(
                    recording_id=recording_id,
                    date=recording.date,
                    account_number=account_number,
                    account_name=self.chart.resolve(account_number),
                    amount=amount,
                    entry_type=entry_type,
                ))
        return flat

    def group_by_account(
        self, transactions: Iterable[FlatTransaction]
    ) -> list[AccountTotals]:
        """
        Debit and credit totals per account number.

        Accounts come out in order of first appearance. A side
        with no lines is Decimal(0), not missing.
        """
        grouped: dict[str, AccountTotals] = {}
        for line in transactions:
            account = grouped.get(line.account_number)
            if account is None:
                account = AccountTotals(
                    account_number=line.account_number,
                    account_name=line.account_name,
                )
                grouped[line.account_number] = account
            if line.entry_type == EntryType.DEBIT:
                account.debit += line.amount
            else:
                account.credit += line.amount
        return list(grouped.values())

    def aggregate(self, recordings: Sequence) -> Aggregation:
        """
        Flatten and group in one pass over the input.

        An overall debit/credit mismatch does not raise here:
        reports must render for any stored balance. The totals
        are returned so the caller can flag it.
        """
        transactions = self.flatten(recordings)
        accounts = self.group_by_account(transactions)
        total_debit, total_credit = totals(transactions)
        if total_debit != total_credit:
            logger.warning(
                "Aggregated lines do not balance: debits=%s, credits=%s",
                total_debit, total_credit,
            )
        return Aggregation(
            transactions=transactions,
            accounts=accounts,
            total_debit=total_debit,
            total_credit=total_credit,
        )
