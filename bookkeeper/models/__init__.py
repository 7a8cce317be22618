"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from bookkeeper.models.base import Base
from bookkeeper.models.enums import EntryType, RecordingType
from bookkeeper.models.balance import Balance
from bookkeeper.models.recording import Recording
from bookkeeper.models.transaction import Transaction

__all__ = [
    "Base",
    "EntryType",
    "RecordingType",
    "Balance",
    "Recording",
    "Transaction",
]
