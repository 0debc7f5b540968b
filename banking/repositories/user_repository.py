"""Repository for user credential data access."""

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from banking.models.user import User


class DuplicateUserError(Exception):
    """Raised when a user with the same DNI already exists."""

    def __init__(self, dni: str):
        self.dni = dni
        super().__init__("User with this DNI already exists")


class UserRepository:
    """Data access layer for users."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: str) -> User | None:
        return await self.session.get(User, user_id)

    async def get_by_dni(self, dni: str) -> User | None:
        result = await self.session.execute(select(User).where(User.dni == dni))
        return result.scalar_one_or_none()

    async def create(self, *, dni: str, pin_hash: str, full_name: str, email: str) -> User:
        """Insert a new user inside the current unit of work.

        The unique index on ``dni`` guarantees that of several concurrent
        signups for the same DNI at most one commits.

        Raises:
            DuplicateUserError: If the DNI is already registered.
        """
        user = User(dni=dni, pin_hash=pin_hash, full_name=full_name, email=email)
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError:
            await self.session.rollback()
            raise DuplicateUserError(dni)
        await self.session.refresh(user)
        return user

    async def update_pin_hash(self, user_id: str, pin_hash: str) -> User | None:
        """Replace the stored PIN hash and bump ``updated_at``."""
        user = await self.get_by_id(user_id)
        if user is None:
            return None

        user.pin_hash = pin_hash
        user.updated_at = datetime.now(UTC)
        await self.session.flush()
        return user
