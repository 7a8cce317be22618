"""
Transaction line model.

One debit or credit against an account number. Lines are
immutable once attached to a recording. The amount is never
negative; the direction lives in entry_type.
"""

from decimal import Decimal

from sqlalchemy import (
    String, ForeignKey, CheckConstraint,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookkeeper.models.base import Base
from bookkeeper.models.enums import EntryType
from bookkeeper.models.types import Money


class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_transactions_amount_non_negative"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    recording_id: Mapped[int] = mapped_column(
        ForeignKey("recordings.id"), nullable=False, index=True
    )
    entry_type: Mapped[EntryType] = mapped_column(
        SAEnum(EntryType, name="entry_type_enum", create_constraint=True),
        nullable=False,
    )
    # Not a foreign key: the chart of accounts is configuration,
    # not a table, and unknown numbers are tolerated.
    account_number: Mapped[str] = mapped_column(
        String(20), nullable=False, index=True
    )
    amount: Mapped[Decimal] = mapped_column(Money(), nullable=False)

    recording: Mapped["Recording"] = relationship(
        back_populates="transactions"
    )

    def __repr__(self) -> str:
        return (
            f"<Transaction {self.entry_type.value} "
            f"{self.account_number} {self.amount}>"
        )
