"""Registration handler.

Flow:
1. Validate email shape and password length (no store access on failure)
2. Check email uniqueness, then username uniqueness
3. Hash password
4. Create account, profile and preferences in one transaction scope
5. Issue access + refresh tokens
6. Return Success(AuthResult)

Two registrations racing past step 2 are settled by the database unique
constraints; the loser gets EMAIL_TAKEN / USERNAME_TAKEN from the repository.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, errors)
- NO infrastructure imports (repositories are injected via protocols)
"""

from src.application.commands.auth_commands import RegisterUser
from src.application.dtos import AuthResult
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import IdentityError
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
    PreferencesRepository,
    ProfileRepository,
    TokenCodecProtocol,
    UnitOfWorkProtocol,
)
from src.domain.validators import validate_email, validate_password


class RegisterUserHandler:
    """Handler for user registration command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        profile_repo: ProfileRepository,
        preferences_repo: PreferencesRepository,
        unit_of_work: UnitOfWorkProtocol,
        password_service: PasswordHashingProtocol,
        token_service: TokenCodecProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            account_repo: Account persistence.
            profile_repo: Profile persistence.
            preferences_repo: Preferences persistence.
            unit_of_work: Transaction scope for the three inserts.
            password_service: Password hashing service.
            token_service: Token codec for the initial token pair.
            logger: Structured logger.
        """
        self._account_repo = account_repo
        self._profile_repo = profile_repo
        self._preferences_repo = preferences_repo
        self._unit_of_work = unit_of_work
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[AuthResult, DomainError]:
        """Handle user registration command.

        Args:
            cmd: RegisterUser command.

        Returns:
            Success(AuthResult) with the new account and token pair.
            Failure(INVALID_EMAIL | WEAK_PASSWORD | EMAIL_TAKEN | USERNAME_TAKEN
            | DATABASE_ERROR) otherwise.
        """
        for validation in (validate_email(cmd.email), validate_password(cmd.password)):
            if isinstance(validation, Failure):
                return validation

        try:
            if await self._account_repo.find_by_email(cmd.email) is not None:
                self._logger.info("registration_rejected", reason="email_taken")
                return Failure(error=IdentityError.EMAIL_TAKEN)

            if await self._account_repo.find_by_username(cmd.username) is not None:
                self._logger.info("registration_rejected", reason="username_taken")
                return Failure(error=IdentityError.USERNAME_TAKEN)

            password_hash = self._password_service.hash_password(cmd.password)

            async with self._unit_of_work.begin():
                created = await self._account_repo.create(
                    email=cmd.email,
                    username=cmd.username,
                    password_hash=password_hash,
                )
                if isinstance(created, Failure):
                    self._logger.info(
                        "registration_rejected", reason=created.error.code.value
                    )
                    return created

                account = created.value
                await self._profile_repo.create(account.id)
                await self._preferences_repo.create(account.id)

        except Exception as e:
            self._logger.error("registration_failed", error=e)
            return Failure(error=IdentityError.DATABASE_ERROR)

        self._logger.info("user_registered", user_id=str(account.id))

        return Success(
            value=AuthResult(
                account=account,
                access_token=self._token_service.generate_access_token(
                    account.id, account.email, account.username
                ),
                refresh_token=self._token_service.generate_refresh_token(
                    account.id, account.email, account.username
                ),
            )
        )
