"""
Tests for the ReportEngine: recording book, ledger, trial balance
and financial statements.
"""

import datetime as dt
from decimal import Decimal

from bookkeeper.chart import ChartOfAccounts
from bookkeeper.engine.reports import ReportEngine
from bookkeeper.models.balance import Balance
from bookkeeper.models.enums import EntryType
from tests.factories import line, recording


# Five-account chart used for the prefix classification cases
PREFIX_CHART = ChartOfAccounts({
    "10000": "Equity A",
    "16000": "Equity B",
    "40000": "Payable",
    "60000": "Expense",
    "70000": "Income",
})


def derive(engine, recordings):
    """Aggregation for a list of recordings."""
    return engine.aggregate(recordings)


class TestRecordingBook:

    def test_amount_in_matching_column(self, chart, balanced_recordings):
        engine = ReportEngine(chart)
        book = engine.recording_book(derive(engine, balanced_recordings).transactions)

        first, second = book.rows[0], book.rows[1]
        assert first.debit == Decimal("1000")
        assert first.credit is None
        assert second.debit is None
        assert second.credit == Decimal("1000")
        assert len(book.rows) == 8

    def test_totals(self, chart, balanced_recordings):
        engine = ReportEngine(chart)
        book = engine.recording_book(derive(engine, balanced_recordings).transactions)

        assert book.total_debit == Decimal("1800")
        assert book.total_credit == Decimal("1800")


class TestLedger:

    def test_debit_balance_goes_on_credit_side(self, chart):
        engine = ReportEngine(chart)
        transactions = derive(engine, [recording([
            line(EntryType.DEBIT, "51200", Decimal("100")),
            line(EntryType.DEBIT, "51200", Decimal("40")),
            line(EntryType.CREDIT, "51200", Decimal("30")),
        ])]).transactions

        account = engine.ledger_account("51200", transactions)

        assert account.debit_entries == [Decimal("100"), Decimal("40")]
        assert account.credit_entries == [Decimal("30")]
        assert account.closing_side == EntryType.CREDIT
        assert account.closing_amount == Decimal("70")
        assert account.credit_side_marker == "D.B. 70"
        assert account.debit_side_marker is None

    def test_credit_balance_goes_on_debit_side(self, chart):
        engine = ReportEngine(chart)
        transactions = derive(engine, [recording([
            line(EntryType.DEBIT, "40000", Decimal("20")),
            line(EntryType.CREDIT, "40000", Decimal("150")),
        ])]).transactions

        account = engine.ledger_account("40000", transactions)

        assert account.debit_side_marker == "C.B. 130"
        assert account.credit_side_marker is None

    def test_uses_largest_entry_not_sum(self, chart):
        engine = ReportEngine(chart)
        # Sums: debit 90, credit 50. Largest entries: debit 30, credit 50.
        transactions = derive(engine, [recording([
            line(EntryType.DEBIT, "51200", Decimal("30")),
            line(EntryType.DEBIT, "51200", Decimal("30")),
            line(EntryType.DEBIT, "51200", Decimal("30")),
            line(EntryType.CREDIT, "51200", Decimal("50")),
        ])]).transactions

        account = engine.ledger_account("51200", transactions)

        assert account.closing_side == EntryType.DEBIT
        assert account.closing_marker == "C.B. 20"

    def test_equal_maxima_have_no_marker(self, chart):
        engine = ReportEngine(chart)
        transactions = derive(engine, [recording([
            line(EntryType.DEBIT, "51200", Decimal("75")),
            line(EntryType.CREDIT, "51200", Decimal("75")),
        ])]).transactions

        account = engine.ledger_account("51200", transactions)

        assert account.closing_side is None
        assert account.closing_marker is None

    def test_one_sided_account_compares_against_zero(self, chart):
        engine = ReportEngine(chart)
        transactions = derive(engine, [recording([
            line(EntryType.DEBIT, "60000", Decimal("12.5")),
        ])]).transactions

        account = engine.ledger_account("60000", transactions)

        assert account.credit_entries == []
        assert account.credit_side_marker == "D.B. 12.5"

    def test_one_account_per_number_in_first_appearance_order(
        self, chart, balanced_recordings
    ):
        engine = ReportEngine(chart)
        ledger = engine.ledger(derive(engine, balanced_recordings).transactions)

        assert [a.account_number for a in ledger] == [
            "51200", "10000", "21800", "40000", "70000", "60000",
        ]
        assert ledger[0].short_number == "512"
        assert ledger[0].account_name == "Bank"


class TestTrialBalance:

    def test_rows_sorted_by_account_number(self, chart, balanced_recordings):
        engine = ReportEngine(chart)
        trial = engine.trial_balance(derive(engine, balanced_recordings).accounts)

        assert [r.account_number for r in trial.rows] == [
            "10000", "21800", "40000", "51200", "60000", "70000",
        ]

    def test_net_amount_on_larger_side(self, chart, balanced_recordings):
        engine = ReportEngine(chart)
        trial = engine.trial_balance(derive(engine, balanced_recordings).accounts)
        rows = {r.account_number: r for r in trial.rows}

        assert rows["51200"].debit == Decimal("1200")
        assert rows["51200"].credit is None
        assert rows["10000"].debit is None
        assert rows["10000"].credit == Decimal("1000")

    def test_footer_totals(self, chart, balanced_recordings):
        engine = ReportEngine(chart)
        trial = engine.trial_balance(derive(engine, balanced_recordings).accounts)

        assert trial.total_debit == Decimal("1700")
        assert trial.total_credit == Decimal("1700")
        assert trial.is_balanced

    def test_debit_only_account_has_blank_credit(self, chart):
        engine = ReportEngine(chart)
        trial = engine.trial_balance(derive(engine, [recording([
            line(EntryType.DEBIT, "60000", Decimal("50")),
        ])]).accounts)

        assert trial.rows[0].debit == Decimal("50")
        assert trial.rows[0].credit is None

    def test_settled_account_has_both_cells_blank(self, chart):
        engine = ReportEngine(chart)
        trial = engine.trial_balance(derive(engine, [recording([
            line(EntryType.DEBIT, "51200", Decimal("10")),
            line(EntryType.CREDIT, "51200", Decimal("10")),
        ])]).accounts)

        assert trial.rows[0].debit is None
        assert trial.rows[0].credit is None
        assert trial.total_debit == Decimal("0")

    def test_empty(self, chart):
        trial = ReportEngine(chart).trial_balance([])

        assert trial.rows == []
        assert trial.is_balanced


class TestStatements:

    def test_profit_and_prefix_classification(self):
        engine = ReportEngine(PREFIX_CHART)
        accounts = derive(engine, [recording([
            line(EntryType.DEBIT, "10000", Decimal("100")),
            line(EntryType.CREDIT, "40000", Decimal("100")),
            line(EntryType.DEBIT, "60000", Decimal("50")),
            line(EntryType.CREDIT, "70000", Decimal("80")),
        ])]).accounts

        statements = engine.statements(accounts)

        income_statement = statements.income_statement
        assert income_statement.profit == Decimal("30")
        assert [item.account_number for item in income_statement.expenses] == ["60000"]
        assert [item.account_number for item in income_statement.income] == ["70000"]
        assert statements.balance_sheet.profit == Decimal("30")

    def test_loans_are_not_equity(self):
        engine = ReportEngine(PREFIX_CHART)
        accounts = derive(engine, [recording([
            line(EntryType.CREDIT, "10000", Decimal("500")),
            line(EntryType.CREDIT, "16000", Decimal("200")),
            line(EntryType.DEBIT, "40000", Decimal("700")),
        ])]).accounts

        sheet = engine.statements(accounts).balance_sheet

        assert [item.account_number for item in sheet.equity] == ["10000"]
        assert [item.account_number for item in sheet.other_debts] == ["16000"]

    def test_payables_with_debit_balance_are_not_debts(self):
        engine = ReportEngine(PREFIX_CHART)
        accounts = derive(engine, [recording([
            line(EntryType.DEBIT, "40000", Decimal("60")),
            line(EntryType.CREDIT, "40000", Decimal("10")),
        ])]).accounts

        sheet = engine.statements(accounts).balance_sheet

        assert sheet.other_debts == []

    def test_balance_sheet_balances(self, chart, balanced_recordings):
        engine = ReportEngine(chart)
        sheet = engine.statements(derive(engine, balanced_recordings).accounts).balance_sheet

        assert [item.account_number for item in sheet.fixed_assets] == ["21800"]
        assert [item.account_number for item in sheet.current_assets] == ["51200"]
        assert sheet.current_assets[0].amount == Decimal("1200")
        assert sheet.profit == Decimal("200")
        assert sheet.total_assets == Decimal("1600")
        assert sheet.total_liabilities == Decimal("1600")
        assert sheet.is_balanced

    def test_mismatch_is_reported_not_raised(self):
        engine = ReportEngine(PREFIX_CHART)
        accounts = derive(engine, [recording([
            line(EntryType.CREDIT, "10000", Decimal("100")),
        ])]).accounts

        sheet = engine.statements(accounts).balance_sheet

        assert sheet.total_assets == Decimal("0")
        assert sheet.total_liabilities == Decimal("100")
        assert not sheet.is_balanced

    def test_empty(self, chart):
        statements = ReportEngine(chart).statements([])

        assert statements.income_statement.profit == Decimal("0")
        assert statements.balance_sheet.total_assets == Decimal("0")
        assert statements.balance_sheet.is_balanced


class TestBuild:

    def test_all_views_from_one_aggregation(self, chart, balanced_recordings):
        balance = Balance(
            id=7,
            name="Q1",
            description="First quarter",
            purpose="Closing",
            date=dt.datetime(2024, 3, 31),
            recordings=balanced_recordings,
        )

        report = ReportEngine(chart).build(balance)

        assert report.balance.id == 7
        assert len(report.recording_book.rows) == 8
        assert len(report.ledger) == 6
        assert report.trial_balance.total_debit == Decimal("1700")
        assert report.statements.income_statement.profit == Decimal("200")
        assert report.is_balanced
