"""Transaction record database model."""

from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Numeric, String, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from banking.models.base import Base, UUIDMixin


class TransactionType(StrEnum):
    """Kinds of balance movement."""

    DEPOSIT = "deposit"


class Transaction(Base, UUIDMixin):
    """Immutable record of a balance movement on an account.

    ``amount``/``currency`` are what the account was credited with;
    ``source_amount``/``source_currency`` are what the client sent.
    """

    __tablename__ = "transactions"

    account_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False), ForeignKey("accounts.id"), nullable=False
    )
    transaction_type: Mapped[str] = mapped_column(String(20), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    source_amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    source_currency: Mapped[str] = mapped_column(String(3), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_txn_amount_positive"),
        Index("idx_txn_account_time", "account_id", "timestamp"),
    )

    def __repr__(self) -> str:
        return f"<Transaction {self.transaction_type}: {self.amount} {self.currency}>"
