"""Create balances, recordings and transactions tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "balances",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("purpose", sa.Text(), nullable=False),
        sa.Column("date", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_balances_date", "balances", ["date"])

    op.create_table(
        "recordings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "balance_id", sa.Integer(),
            sa.ForeignKey("balances.id"), nullable=False,
        ),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column(
            "type",
            sa.Enum(
                "INVOICE", "WITHDRAWAL", "TRANSFER", "PAYMENT",
                name="recording_type_enum",
                create_constraint=True,
            ),
            nullable=False,
        ),
    )
    op.create_index("ix_recordings_balance_id", "recordings", ["balance_id"])

    op.create_table(
        "transactions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "recording_id", sa.Integer(),
            sa.ForeignKey("recordings.id"), nullable=False,
        ),
        sa.Column(
            "entry_type",
            sa.Enum(
                "DEBIT", "CREDIT",
                name="entry_type_enum",
                create_constraint=True,
            ),
            nullable=False,
        ),
        sa.Column("account_number", sa.String(length=20), nullable=False),
        sa.Column(
            "amount",
            sa.Numeric(19, 4).with_variant(sa.String(length=21), "sqlite"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "amount >= 0", name="ck_transactions_amount_non_negative"
        ),
    )
    op.create_index(
        "ix_transactions_recording_id", "transactions", ["recording_id"]
    )
    op.create_index(
        "ix_transactions_account_number", "transactions", ["account_number"]
    )


def downgrade() -> None:
    op.drop_index("ix_transactions_account_number", table_name="transactions")
    op.drop_index("ix_transactions_recording_id", table_name="transactions")
    op.drop_table("transactions")
    op.drop_index("ix_recordings_balance_id", table_name="recordings")
    op.drop_table("recordings")
    op.drop_index("ix_balances_date", table_name="balances")
    op.drop_table("balances")
