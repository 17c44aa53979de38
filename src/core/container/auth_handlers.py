"""Authentication handler dependency factories.

Request-scoped handler instances for authentication operations:
- Registration, login, token refresh, token validation
- Password reset (request and confirm)

Each factory builds repositories over the request's session and pulls
application-scoped singletons from the infrastructure module.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_password_service,
    get_reset_token_delivery,
    get_reset_token_service,
    get_token_service,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.confirm_password_reset_handler import (
        ConfirmPasswordResetHandler,
    )
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from src.application.queries.handlers.validate_token_handler import (
        ValidateTokenHandler,
    )


# ============================================================================
# Authentication Handler Factories
# ============================================================================


async def get_register_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped).

    Dependencies:
    - AccountRepository, ProfileRepository, PreferencesRepository (session)
    - SqlAlchemyUnitOfWork (session)
    - BcryptPasswordService, JWTService, logger (app-scoped singletons)

    Usage:
        @router.post("/auth/register")
        async def register(
            handler: RegisterUserHandler = Depends(get_register_user_handler),
        ):
            result = await handler.handle(command)
    """
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        PreferencesRepository,
        ProfileRepository,
    )
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return RegisterUserHandler(
        account_repo=AccountRepository(session=session),
        profile_repo=ProfileRepository(session=session),
        preferences_repo=PreferencesRepository(session=session),
        unit_of_work=SqlAlchemyUnitOfWork(session),
        password_service=get_password_service(),
        token_service=get_token_service(),
        logger=get_logger(),
    )


async def get_login_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped)."""
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.infrastructure.persistence.repositories import AccountRepository

    return LoginUserHandler(
        account_repo=AccountRepository(session=session),
        password_service=get_password_service(),
        token_service=get_token_service(),
        logger=get_logger(),
    )


async def get_refresh_token_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RefreshAccessTokenHandler":
    """Get RefreshAccessToken command handler (request-scoped)."""
    from src.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )
    from src.infrastructure.persistence.repositories import AccountRepository

    return RefreshAccessTokenHandler(
        account_repo=AccountRepository(session=session),
        token_service=get_token_service(),
        logger=get_logger(),
    )


def get_validate_token_handler() -> "ValidateTokenHandler":
    """Get ValidateToken query handler (stateless, no session)."""
    from src.application.queries.handlers.validate_token_handler import (
        ValidateTokenHandler,
    )

    return ValidateTokenHandler(token_service=get_token_service())


async def get_request_password_reset_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RequestPasswordResetHandler":
    """Get RequestPasswordReset command handler (request-scoped).

    Dependencies:
    - AccountRepository, ResetTicketRepository (session)
    - PasswordResetTokenService, BcryptPasswordService (app-scoped)
    - LogResetTokenDelivery, logger (app-scoped)
    """
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        ResetTicketRepository,
    )

    return RequestPasswordResetHandler(
        account_repo=AccountRepository(session=session),
        reset_ticket_repo=ResetTicketRepository(session=session),
        reset_token_service=get_reset_token_service(),
        password_service=get_password_service(),
        delivery=get_reset_token_delivery(),
        logger=get_logger(),
    )


async def get_confirm_password_reset_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ConfirmPasswordResetHandler":
    """Get ConfirmPasswordReset command handler (request-scoped)."""
    from src.application.commands.handlers.confirm_password_reset_handler import (
        ConfirmPasswordResetHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        ResetTicketRepository,
    )
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return ConfirmPasswordResetHandler(
        account_repo=AccountRepository(session=session),
        reset_ticket_repo=ResetTicketRepository(session=session),
        unit_of_work=SqlAlchemyUnitOfWork(session),
        password_service=get_password_service(),
        logger=get_logger(),
    )
