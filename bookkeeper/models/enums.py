"""
Shared enumerations for database models.

Using Python enums mapped to database enums ensures that
only valid values can be stored. An invalid recording type
or entry type is caught at the database level, not just
in Python validation.
"""

import enum


class EntryType(str, enum.Enum):
    """Direction of a transaction line."""
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class RecordingType(str, enum.Enum):
    """Business event a recording documents."""
    INVOICE = "INVOICE"
    WITHDRAWAL = "WITHDRAWAL"
    TRANSFER = "TRANSFER"
    PAYMENT = "PAYMENT"
