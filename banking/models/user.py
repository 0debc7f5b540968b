"""User database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from banking.models.base import Base, TimestampMixin, UUIDMixin


class User(Base, UUIDMixin, TimestampMixin):
    """A bank customer identified by their national ID (DNI/NIE).

    ``pin_hash`` and ``updated_at`` change only when the PIN is rotated.
    """

    __tablename__ = "users"

    dni: Mapped[str] = mapped_column(String(9), unique=True, nullable=False, index=True)
    pin_hash: Mapped[str] = mapped_column(String(60), nullable=False)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User {self.id}>"
