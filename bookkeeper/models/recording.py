"""
Recording model.

A dated business event (invoice, withdrawal, transfer,
payment) inside a balance. Its transaction lines carry the
actual debits and credits.
"""

import datetime as dt

from sqlalchemy import Date, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookkeeper.models.base import Base
from bookkeeper.models.enums import RecordingType


class Recording(Base):
    __tablename__ = "recordings"

    id: Mapped[int] = mapped_column(primary_key=True)
    balance_id: Mapped[int] = mapped_column(
        ForeignKey("balances.id"), nullable=False, index=True
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    type: Mapped[RecordingType] = mapped_column(
        SAEnum(
            RecordingType,
            name="recording_type_enum",
            create_constraint=True,
        ),
        nullable=False,
    )

    balance: Mapped["Balance"] = relationship(back_populates="recordings")
    transactions: Mapped[list["Transaction"]] = relationship(
        back_populates="recording",
        cascade="all, delete-orphan",
        order_by="Transaction.id",
    )

    def __repr__(self) -> str:
        return f"<Recording {self.type.value} {self.date}>"
