"""create_banking_tables

Revision ID: b7c1d2e3f4a5
Revises:
Create Date: 2026-10-18 10:00:00.000000
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "b7c1d2e3f4a5"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.text("now()"),
        nullable=False,
    )


def upgrade() -> None:
    """Create users, accounts and transactions tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(as_uuid=False), nullable=False),
        sa.Column("dni", sa.String(length=9), nullable=False),
        sa.Column("pin_hash", sa.String(length=60), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_dni"), "users", ["dni"], unique=True)

    op.create_table(
        "accounts",
        sa.Column("id", sa.UUID(as_uuid=False), nullable=False),
        sa.Column("user_id", sa.UUID(as_uuid=False), nullable=False),
        sa.Column("account_number", sa.String(length=10), nullable=False),
        sa.Column("balance", sa.Numeric(15, 2), nullable=False, server_default="0"),
        sa.Column("currency", sa.String(length=3), nullable=False, server_default="USD"),
        sa.Column("account_type", sa.String(length=20), nullable=False, server_default="checking"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.CheckConstraint("balance >= 0", name="ck_account_balance_non_negative"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_accounts_user_id"), "accounts", ["user_id"])
    op.create_index(op.f("ix_accounts_account_number"), "accounts", ["account_number"], unique=True)

    op.create_table(
        "transactions",
        sa.Column("id", sa.UUID(as_uuid=False), nullable=False),
        sa.Column("account_id", sa.UUID(as_uuid=False), nullable=False),
        sa.Column("transaction_type", sa.String(length=20), nullable=False),
        sa.Column("amount", sa.Numeric(15, 2), nullable=False),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("source_amount", sa.Numeric(15, 2), nullable=False),
        sa.Column("source_currency", sa.String(length=3), nullable=False),
        _timestamp("timestamp"),
        sa.CheckConstraint("amount > 0", name="ck_txn_amount_positive"),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_txn_account_time", "transactions", ["account_id", "timestamp"])


def downgrade() -> None:
    """Drop banking tables."""
    op.drop_index("idx_txn_account_time", table_name="transactions")
    op.drop_table("transactions")
    op.drop_index(op.f("ix_accounts_account_number"), table_name="accounts")
    op.drop_index(op.f("ix_accounts_user_id"), table_name="accounts")
    op.drop_table("accounts")
    op.drop_index(op.f("ix_users_dni"), table_name="users")
    op.drop_table("users")
