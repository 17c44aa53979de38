"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (engine + connection pool)
- Password hashing (bcrypt)
- Token codec (JWT)
- Reset secret generation and delivery
- Logging (structlog)

Plus the request-scoped database session.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.enums import Environment
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols import (
        LoggerProtocol,
        PasswordHashingProtocol,
        ResetTokenDeliveryProtocol,
        ResetTokenServiceProtocol,
        TokenCodecProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.

    Yields:
        Database session for request duration.

    Usage:
        @router.post("/auth/register")
        async def register(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the configured cost factor
    (BCRYPT_ROUNDS, default 10).
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenCodecProtocol":
    """Get JWT token codec singleton (app-scoped).

    Access and refresh lifetimes come from settings (24h / 7 days by default).
    """
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        access_expiration_minutes=settings.access_token_expire_minutes,
        refresh_expiration_days=settings.refresh_token_expire_days,
    )


@lru_cache()
def get_reset_token_service() -> "ResetTokenServiceProtocol":
    """Get password reset secret service singleton (app-scoped)."""
    from src.infrastructure.security import PasswordResetTokenService

    return PasswordResetTokenService(
        expiration_minutes=settings.password_reset_expire_minutes,
    )


@lru_cache()
def get_reset_token_delivery() -> "ResetTokenDeliveryProtocol":
    """Get reset secret delivery adapter singleton (app-scoped).

    Every environment uses LogResetTokenDelivery until a mail adapter exists.
    """
    from src.infrastructure.email import LogResetTokenDelivery

    return LogResetTokenDelivery(logger=get_logger(), api_base_url=settings.api_base_url)


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.environment is not Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)
