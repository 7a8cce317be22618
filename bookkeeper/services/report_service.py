"""
Report service — loads a balance and derives its reports.

The database read happens first; the derivation itself is
done by the pure ReportEngine and is recomputed on every call.
"""

from sqlalchemy.orm import Session

from bookkeeper.chart import ChartOfAccounts
from bookkeeper.engine.reports import ReportEngine
from bookkeeper.schemas.reports import (
    BalanceReport,
    FinancialStatements,
    LedgerAccount,
    RecordingBook,
    TrialBalance,
)
from bookkeeper.services.balance_service import BalanceService


class ReportService:

    def __init__(self, db: Session, chart: ChartOfAccounts):
        self.db = db
        self.balance_service = BalanceService(db, chart)
        self.engine = ReportEngine(chart)

    def _aggregate(self, balance_id: int):
        balance = self.balance_service.get_balance(balance_id)
        return self.engine.aggregate(balance.recordings)

    def get_report(self, balance_id: int) -> BalanceReport:
        """Every view for a balance. Raises NotFoundError if missing."""
        balance = self.balance_service.get_balance(balance_id)
        return self.engine.build(balance)

    def get_recording_book(self, balance_id: int) -> RecordingBook:
        return self.engine.recording_book(self._aggregate(balance_id).transactions)

    def get_ledger(self, balance_id: int) -> list[LedgerAccount]:
        return self.engine.ledger(self._aggregate(balance_id).transactions)

    def get_trial_balance(self, balance_id: int) -> TrialBalance:
        return self.engine.trial_balance(self._aggregate(balance_id).accounts)

    def get_statements(self, balance_id: int) -> FinancialStatements:
        return self.engine.statements(self._aggregate(balance_id).accounts)
