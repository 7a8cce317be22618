"""
Balance service — creates and loads balances.

Creation is the one place where the double-entry rule is
enforced before anything is stored:
1. Every line has a known entry type and a non-negative amount
2. Total debits equal total credits across all recordings

If any check fails, nothing is written. The caller controls
the commit.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from bookkeeper.chart import ChartOfAccounts
from bookkeeper.engine.aggregation import AggregationEngine, validate_balanced
from bookkeeper.errors import NotFoundError, balance_not_found
from bookkeeper.models.balance import Balance
from bookkeeper.models.recording import Recording
from bookkeeper.models.transaction import Transaction
from bookkeeper.schemas.balance import BalanceCreate

logger = logging.getLogger(__name__)


class BalanceService:
    """
    All balance reads and writes pass through this service.

    The service takes a database session as a constructor
    argument, so the caller decides when to commit or roll back.
    """

    def __init__(self, db: Session, chart: ChartOfAccounts):
        self.db = db
        self.chart = chart
        self.aggregation = AggregationEngine(chart)

    def create_balance(self, request: BalanceCreate) -> Balance:
        """
        Validate and store a complete balance.

        Raises ValidationError if a line is malformed or the
        recordings do not balance. Nothing is added to the
        session in that case.
        """
        flat = self.aggregation.flatten(request.recordings)
        total_debit, _ = validate_balanced(flat)

        unknown = sorted({t.account_number for t in flat if t.account_number not in self.chart})
        if unknown:
            logger.warning(
                "Balance %r uses account numbers not in the chart: %s",
                request.general_info.name, ", ".join(unknown),
            )

        balance = Balance(
            name=request.general_info.name,
            description=request.general_info.description,
            purpose=request.general_info.purpose,
            recordings=[
                Recording(
                    date=recording.date,
                    type=recording.type,
                    transactions=[
                        Transaction(
                            entry_type=line.entry_type,
                            account_number=line.account_number,
                            amount=line.amount,
                        )
                        for line in recording.transactions
                    ],
                )
                for recording in request.recordings
            ],
        )
        self.db.add(balance)
        self.db.flush()

        logger.info(
            "Created balance %s %r: %d recordings, %d lines, total %s",
            balance.id, balance.name, len(balance.recordings),
            len(flat), total_debit,
        )
        return balance

    def get_balance(self, balance_id: int) -> Balance:
        """
        Load a balance with its recordings and lines.

        Raises NotFoundError if there is no such balance.
        """
        balance = self.db.execute(
            select(Balance)
            .where(Balance.id == balance_id)
            .options(
                selectinload(Balance.recordings)
                .selectinload(Recording.transactions)
            )
        ).scalar_one_or_none()

        if balance is None:
            logger.info("Balance %s not found", balance_id)
            raise NotFoundError(balance_not_found(balance_id))
        return balance

    def list_balances(self) -> list[Balance]:
        """Return every balance, oldest first."""
        balances = self.db.execute(
            select(Balance).order_by(Balance.date.asc(), Balance.id.asc())
        ).scalars().all()
        return list(balances)
