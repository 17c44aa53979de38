"""AccountRepository - SQLAlchemy implementation of AccountRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Account entities and database AccountModel.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.errors import ConflictError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account, AccountCredentials
from src.domain.errors import IdentityError
from src.infrastructure.persistence.models.account import AccountModel

_UNIQUE_CONSTRAINT_ERRORS = {
    "uq_accounts_email": IdentityError.EMAIL_TAKEN,
    "uq_accounts_username": IdentityError.USERNAME_TAKEN,
}


class AccountRepository:
    """SQLAlchemy implementation of AccountRepository protocol.

    Writes are flushed, not committed: the request-scoped session owns the
    outer transaction.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = AccountRepository(session)
        ...     account = await repo.find_by_email("alice@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Domain Account entity if found, None otherwise.
        """
        model = await self.session.get(AccountModel, account_id)
        return self._to_domain(model) if model is not None else None

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by email (exact, case-sensitive match).

        Args:
            email: Email address as registered.

        Returns:
            Domain Account entity if found, None otherwise.
        """
        model = await self._find_model_by_email(email)
        return self._to_domain(model) if model is not None else None

    async def find_by_username(self, username: str) -> Account | None:
        """Find account by username (exact match).

        Args:
            username: Username as registered.

        Returns:
            Domain Account entity if found, None otherwise.
        """
        stmt = select(AccountModel).where(AccountModel.username == username)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_credentials_by_email(self, email: str) -> AccountCredentials | None:
        """Find account and password hash by email (login only).

        Args:
            email: Email address as registered.

        Returns:
            AccountCredentials if found, None otherwise.
        """
        model = await self._find_model_by_email(email)
        if model is None:
            return None
        return AccountCredentials(
            account=self._to_domain(model),
            password_hash=model.password_hash,
        )

    async def create(
        self,
        email: str,
        username: str,
        password_hash: str,
    ) -> Result[Account, ConflictError]:
        """Insert a new account.

        The insert runs in a SAVEPOINT so a unique violation rolls back only
        this statement and leaves the surrounding transaction usable.

        Args:
            email: Unique email address.
            username: Unique username.
            password_hash: bcrypt digest.

        Returns:
            Success(Account) or Failure(EMAIL_TAKEN / USERNAME_TAKEN).

        Raises:
            IntegrityError: For violations other than email/username uniqueness.
        """
        model = AccountModel(email=email, username=username, password_hash=password_hash)
        try:
            async with self.session.begin_nested():
                self.session.add(model)
                await self.session.flush()
        except IntegrityError as e:
            error = _conflict_from_integrity_error(e)
            if error is None:
                raise
            return Failure(error=error)

        await self.session.refresh(model)
        return Success(value=self._to_domain(model))

    async def update_password(self, account_id: UUID, password_hash: str) -> None:
        """Replace password hash and touch updated_at.

        Args:
            account_id: Account's unique identifier.
            password_hash: New bcrypt digest.

        Raises:
            NoResultFound: If account doesn't exist.
        """
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.password_hash = password_hash
        model.updated_at = datetime.now(UTC)

        await self.session.flush()

    async def _find_model_by_email(self, email: str) -> AccountModel | None:
        stmt = select(AccountModel).where(AccountModel.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_domain(self, model: AccountModel) -> Account:
        """Convert database model to domain entity (hash stripped)."""
        return Account(
            id=model.id,
            email=model.email,
            username=model.username,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


def _conflict_from_integrity_error(error: IntegrityError) -> ConflictError | None:
    """Map a unique violation to EMAIL_TAKEN / USERNAME_TAKEN by constraint name."""
    detail = str(error.orig)
    for constraint_name, conflict in _UNIQUE_CONSTRAINT_ERRORS.items():
        if constraint_name in detail:
            return conflict
    return None
