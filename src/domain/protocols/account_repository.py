"""AccountRepository protocol (port) for domain layer.

Following hexagonal architecture:
- Domain defines what it needs (protocol/port)
- Infrastructure provides implementation (adapter)
- Domain has no knowledge of how accounts are stored

Uniqueness of email and username is enforced by the store. ``create`` reports a
unique-constraint violation as ``Failure(ConflictError)`` so that two racing
registrations resolve to EMAIL_TAKEN / USERNAME_TAKEN for the loser.
"""

from typing import Protocol
from uuid import UUID

from src.core.errors import ConflictError
from src.core.result import Result
from src.domain.entities.account import Account, AccountCredentials


class AccountRepository(Protocol):
    """Protocol for account persistence operations.

    Implementations:
        - AccountRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by identifier.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by exact (case-sensitive) email.

        Args:
            email: Email address as registered.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def find_by_username(self, username: str) -> Account | None:
        """Find account by exact username.

        Args:
            username: Username as registered.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def find_credentials_by_email(self, email: str) -> AccountCredentials | None:
        """Find account together with its password hash.

        Only the login flow should call this.

        Args:
            email: Email address as registered.

        Returns:
            AccountCredentials if found, None otherwise.
        """
        ...

    async def create(
        self,
        email: str,
        username: str,
        password_hash: str,
    ) -> Result[Account, ConflictError]:
        """Insert a new account.

        Args:
            email: Unique email address.
            username: Unique username.
            password_hash: bcrypt digest of the password.

        Returns:
            Success(Account) with store-assigned id and timestamps, or
            Failure(EMAIL_TAKEN / USERNAME_TAKEN) on a unique violation.
        """
        ...

    async def update_password(self, account_id: UUID, password_hash: str) -> None:
        """Replace the account's password hash and touch ``updated_at``.

        Args:
            account_id: Account's unique identifier.
            password_hash: New bcrypt digest.
        """
        ...
