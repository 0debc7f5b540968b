"""Bank account database model."""

from decimal import Decimal
from enum import StrEnum

from sqlalchemy import CheckConstraint, ForeignKey, Numeric, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from banking.models.base import Base, TimestampMixin, UUIDMixin


class AccountType(StrEnum):
    """Supported account types."""

    CHECKING = "checking"
    SAVINGS = "savings"


class Account(Base, UUIDMixin, TimestampMixin):
    """An account owned by a single user, holding one currency."""

    __tablename__ = "accounts"

    user_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False), ForeignKey("users.id"), nullable=False, index=True
    )
    account_number: Mapped[str] = mapped_column(
        String(10), unique=True, nullable=False, index=True
    )
    balance: Mapped[Decimal] = mapped_column(Numeric(15, 2), default=Decimal("0"), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), default="USD", nullable=False)
    account_type: Mapped[str] = mapped_column(
        String(20), default=AccountType.CHECKING.value, nullable=False
    )

    __table_args__ = (CheckConstraint("balance >= 0", name="ck_account_balance_non_negative"),)

    def __repr__(self) -> str:
        return f"<Account {self.account_number}: {self.balance} {self.currency}>"
