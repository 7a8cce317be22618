"""
Report derivation.

Builds the four accounting views from an aggregation:

- recording book: every line, debit and credit in separate columns
- ledger: one T-account per account number
- trial balance: net debit or net credit per account
- financial statements: income statement and balance sheet

Accounts are routed into statement sections by string prefix
of the account number:

    income statement   expenses "6", income "7"
    balance sheet      fixed assets "2", current assets "5",
                       equity "1" except "16",
                       other debts "4" or "16" with credit > debit

Empty input yields empty sections and zero totals.
"""

import logging
from decimal import Decimal
from typing import Callable, Iterable, Sequence

from bookkeeper.chart import ChartOfAccounts, numeric_sort_key, short_account_number
from bookkeeper.engine.aggregation import AggregationEngine
from bookkeeper.models.enums import EntryType
from bookkeeper.schemas.balance import BalanceSummary
from bookkeeper.schemas.reports import (
    ZERO,
    AccountTotals,
    Aggregation,
    BalanceReport,
    BalanceSheet,
    FinancialStatements,
    FlatTransaction,
    IncomeStatement,
    LedgerAccount,
    RecordingBook,
    RecordingBookRow,
    StatementLine,
    TrialBalance,
    TrialBalanceRow,
)

logger = logging.getLogger(__name__)

CREDIT_BALANCE_LABEL = "C.B."
DEBIT_BALANCE_LABEL = "D.B."

EXPENSE_PREFIX = "6"
INCOME_PREFIX = "7"
FIXED_ASSET_PREFIX = "2"
CURRENT_ASSET_PREFIX = "5"
EQUITY_PREFIX = "1"
LOAN_PREFIX = "16"
PAYABLE_PREFIX = "4"


# --- Statement section rules ---

def is_expense(account: AccountTotals) -> bool:
    return account.account_number.startswith(EXPENSE_PREFIX)


def is_income(account: AccountTotals) -> bool:
    return account.account_number.startswith(INCOME_PREFIX)


def is_fixed_asset(account: AccountTotals) -> bool:
    return account.account_number.startswith(FIXED_ASSET_PREFIX)


def is_current_asset(account: AccountTotals) -> bool:
    return account.account_number.startswith(CURRENT_ASSET_PREFIX)


def is_equity(account: AccountTotals) -> bool:
    number = account.account_number
    return number.startswith(EQUITY_PREFIX) and not number.startswith(LOAN_PREFIX)


def is_other_debt(account: AccountTotals) -> bool:
    number = account.account_number
    return (
        (number.startswith(PAYABLE_PREFIX) or number.startswith(LOAN_PREFIX))
        and account.credit > account.debit
    )


def _sum(amounts: Iterable[Decimal]) -> Decimal:
    return sum(amounts, ZERO)


def _sorted(accounts: Iterable[AccountTotals]) -> list[AccountTotals]:
    return sorted(accounts, key=lambda a: numeric_sort_key(a.account_number))


def _lines(
    accounts: Sequence[AccountTotals],
    rule: Callable[[AccountTotals], bool],
) -> list[StatementLine]:
    return [
        StatementLine(
            account_number=account.account_number,
            short_number=short_account_number(account.account_number),
            account_name=account.account_name,
            amount=account.net,
        )
        for account in accounts
        if rule(account)
    ]


class ReportEngine:
    """Derives every accounting view for one balance."""

    def __init__(self, chart: ChartOfAccounts):
        self.chart = chart
        self.aggregation = AggregationEngine(chart)

    def aggregate(self, recordings: Sequence) -> Aggregation:
        return self.aggregation.aggregate(recordings)

    # --- Recording book ---

    def recording_book(self, transactions: Sequence[FlatTransaction]) -> RecordingBook:
        """The flat transaction log with the amount in its own column."""
        rows = []
        total_debit = ZERO
        total_credit = ZERO
        for line in transactions:
            is_debit = line.entry_type == EntryType.DEBIT
            rows.append(RecordingBookRow(
                recording_id=line.recording_id,
                date=line.date,
                account_number=line.account_number,
                account_name=line.account_name,
                debit=line.amount if is_debit else None,
                credit=None if is_debit else line.amount,
            ))
            if is_debit:
                total_debit += line.amount
            else:
                total_credit += line.amount
        return RecordingBook(
            rows=rows, total_debit=total_debit, total_credit=total_credit
        )

    # --- Ledger ---

    def ledger_account(
        self,
        account_number: str,
        transactions: Sequence[FlatTransaction],
    ) -> LedgerAccount:
        """
        T-account for one account number.

        The closing line compares the largest single debit with the
        largest single credit, not the column sums. If the largest
        credit wins, "C.B. <difference>" goes on the debit side; if
        the largest debit wins, "D.B. <difference>" goes on the
        credit side; a tie leaves both sides without one.
        """
        lines = [t for t in transactions if t.account_number == account_number]
        debit_entries = [t.amount for t in lines if t.entry_type == EntryType.DEBIT]
        credit_entries = [t.amount for t in lines if t.entry_type == EntryType.CREDIT]

        max_debit = max([ZERO, *debit_entries])
        max_credit = max([ZERO, *credit_entries])
        difference = abs(max_debit - max_credit)

        closing_side = closing_label = closing_amount = None
        if max_debit < max_credit:
            closing_side = EntryType.DEBIT
            closing_label = CREDIT_BALANCE_LABEL
            closing_amount = difference
        elif max_debit > max_credit:
            closing_side = EntryType.CREDIT
            closing_label = DEBIT_BALANCE_LABEL
            closing_amount = difference

        return LedgerAccount(
            account_number=account_number,
            short_number=short_account_number(account_number),
            account_name=self.chart.resolve(account_number),
            debit_entries=debit_entries,
            credit_entries=credit_entries,
            closing_side=closing_side,
            closing_label=closing_label,
            closing_amount=closing_amount,
        )

    def ledger(self, transactions: Sequence[FlatTransaction]) -> list[LedgerAccount]:
        """One T-account per distinct account, in order of first appearance."""
        account_numbers = dict.fromkeys(t.account_number for t in transactions)
        return [
            self.ledger_account(number, transactions)
            for number in account_numbers
        ]

    # --- Trial balance ---

    def trial_balance(self, accounts: Sequence[AccountTotals]) -> TrialBalance:
        """
        Net position per account, sorted by account number.

        Only the larger side gets a value; the other cell is blank.
        The footer sums each derived column on its own.
        """
        rows = []
        for account in _sorted(accounts):
            rows.append(TrialBalanceRow(
                account_number=account.account_number,
                account_name=account.account_name,
                debit=account.debit - account.credit if account.debit > account.credit else None,
                credit=account.credit - account.debit if account.credit > account.debit else None,
            ))
        trial_balance = TrialBalance(
            rows=rows,
            total_debit=_sum(r.debit for r in rows if r.debit is not None),
            total_credit=_sum(r.credit for r in rows if r.credit is not None),
        )
        if not trial_balance.is_balanced:
            logger.warning(
                "Trial balance totals differ: debit=%s, credit=%s",
                trial_balance.total_debit, trial_balance.total_credit,
            )
        return trial_balance

    # --- Financial statements ---

    def income_statement(self, accounts: Sequence[AccountTotals]) -> IncomeStatement:
        ordered = _sorted(accounts)
        expenses = _lines(ordered, is_expense)
        income = _lines(ordered, is_income)
        total_expenses = _sum(line.amount for line in expenses)
        total_income = _sum(line.amount for line in income)
        return IncomeStatement(
            expenses=expenses,
            income=income,
            total_expenses=total_expenses,
            total_income=total_income,
            profit=total_income - total_expenses,
        )

    def balance_sheet(
        self,
        accounts: Sequence[AccountTotals],
        profit: Decimal,
    ) -> BalanceSheet:
        """
        Assets against equity and debts.

        Profit comes from the income statement so both statements
        agree on it. Totals are expected to match when the chart
        and the recordings are consistent; a mismatch is reported
        through is_balanced, never raised.
        """
        ordered = _sorted(accounts)
        fixed_assets = _lines(ordered, is_fixed_asset)
        current_assets = _lines(ordered, is_current_asset)
        equity = _lines(ordered, is_equity)
        other_debts = _lines(ordered, is_other_debt)

        total_assets = _sum(line.amount for line in fixed_assets + current_assets)
        total_liabilities = (
            _sum(line.amount for line in equity)
            + profit
            + _sum(line.amount for line in other_debts)
        )
        sheet = BalanceSheet(
            fixed_assets=fixed_assets,
            current_assets=current_assets,
            equity=equity,
            other_debts=other_debts,
            profit=profit,
            total_assets=total_assets,
            total_liabilities=total_liabilities,
        )
        if not sheet.is_balanced:
            logger.warning(
                "Balance sheet does not balance: assets=%s, liabilities=%s",
                total_assets, total_liabilities,
            )
        return sheet

    def statements(self, accounts: Sequence[AccountTotals]) -> FinancialStatements:
        income_statement = self.income_statement(accounts)
        return FinancialStatements(
            income_statement=income_statement,
            balance_sheet=self.balance_sheet(accounts, income_statement.profit),
        )

    # --- Everything ---

    def build(self, balance) -> BalanceReport:
        """
        All views for a balance, computed from a single aggregation
        so the trial balance, profit and balance sheet totals can
        never disagree on the underlying numbers.
        """
        aggregation = self.aggregate(balance.recordings)
        return BalanceReport(
            balance=BalanceSummary.model_validate(balance),
            recording_book=self.recording_book(aggregation.transactions),
            ledger=self.ledger(aggregation.transactions),
            trial_balance=self.trial_balance(aggregation.accounts),
            statements=self.statements(aggregation.accounts),
            total_debit=aggregation.total_debit,
            total_credit=aggregation.total_credit,
        )
