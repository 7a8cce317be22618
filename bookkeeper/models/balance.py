"""
Balance model.

A balance is one accounting period. It is the root of the
aggregate: it owns its recordings, which own their
transaction lines. Nothing is shared between balances.

Balances are created once and never modified afterwards.
"""

from datetime import datetime

from sqlalchemy import String, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookkeeper.models.base import Base


class Balance(Base):
    __tablename__ = "balances"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    purpose: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow, index=True
    )

    # Recordings come back in the order they were created
    recordings: Mapped[list["Recording"]] = relationship(
        back_populates="balance",
        cascade="all, delete-orphan",
        order_by="Recording.id",
    )

    def __repr__(self) -> str:
        return f"<Balance {self.id} {self.name!r}>"
