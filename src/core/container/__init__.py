"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_register_user_handler

Modules:
- infrastructure: Core services (database, security, logging)
- auth_handlers: Authentication handler factories
- user_handlers: Profile/preferences handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_password_service,
    get_reset_token_delivery,
    get_reset_token_service,
    get_token_service,
)

# Auth handlers
from src.core.container.auth_handlers import (
    get_confirm_password_reset_handler,
    get_login_user_handler,
    get_refresh_token_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
    get_validate_token_handler,
)

# User handlers
from src.core.container.user_handlers import (
    get_update_preferences_handler,
    get_update_profile_handler,
    get_user_profile_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_password_service",
    "get_reset_token_delivery",
    "get_reset_token_service",
    "get_token_service",
    # Auth handlers
    "get_confirm_password_reset_handler",
    "get_login_user_handler",
    "get_refresh_token_handler",
    "get_register_user_handler",
    "get_request_password_reset_handler",
    "get_validate_token_handler",
    # User handlers
    "get_update_preferences_handler",
    "get_update_profile_handler",
    "get_user_profile_handler",
]
