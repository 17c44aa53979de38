"""API test fixtures.

The real app and the real handlers run over an in-memory store: every
handler factory in the container is overridden with one that wires the
handler to the in-memory repositories, the test signing key, a cheap
bcrypt cost and a recording reset-secret delivery.
"""

import pytest
from fastapi.testclient import TestClient

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
from src.application.commands.handlers.update_preferences_handler import (
    UpdatePreferencesHandler,
)
from src.application.commands.handlers.update_profile_handler import (
    UpdateProfileHandler,
)
from src.application.queries.handlers.get_user_profile_handler import (
    GetUserProfileHandler,
)
from src.application.queries.handlers.validate_token_handler import (
    ValidateTokenHandler,
)
from src.core.container import (
    get_confirm_password_reset_handler,
    get_logger,
    get_login_user_handler,
    get_refresh_token_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
    get_token_service,
    get_update_preferences_handler,
    get_update_profile_handler,
    get_user_profile_handler,
    get_validate_token_handler,
)
from src.infrastructure.security import (
    BcryptPasswordService,
    JWTService,
    PasswordResetTokenService,
)
from src.main import app
from tests.conftest import TEST_SECRET_KEY
from tests.utils.in_memory import (
    InMemoryAccountRepository,
    InMemoryPreferencesRepository,
    InMemoryProfileRepository,
    InMemoryResetTicketRepository,
    InMemoryStore,
    InMemoryUnitOfWork,
    RecordingResetTokenDelivery,
)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def delivery():
    return RecordingResetTokenDelivery()


@pytest.fixture
def token_service():
    return JWTService(secret_key=TEST_SECRET_KEY)


@pytest.fixture
def client(store, delivery, token_service):
    """TestClient over the real app with every handler bound to the store."""
    password_service = BcryptPasswordService(cost_factor=10)
    logger = get_logger()

    def profile_repos():
        return {
            "account_repo": InMemoryAccountRepository(store),
            "profile_repo": InMemoryProfileRepository(store),
            "preferences_repo": InMemoryPreferencesRepository(store),
        }

    app.dependency_overrides = {
        get_token_service: lambda: token_service,
        get_register_user_handler: lambda: RegisterUserHandler(
            **profile_repos(),
            unit_of_work=InMemoryUnitOfWork(store),
            password_service=password_service,
            token_service=token_service,
            logger=logger,
        ),
        get_login_user_handler: lambda: LoginUserHandler(
            account_repo=InMemoryAccountRepository(store),
            password_service=password_service,
            token_service=token_service,
            logger=logger,
        ),
        get_refresh_token_handler: lambda: RefreshAccessTokenHandler(
            account_repo=InMemoryAccountRepository(store),
            token_service=token_service,
            logger=logger,
        ),
        get_validate_token_handler: lambda: ValidateTokenHandler(
            token_service=token_service
        ),
        get_request_password_reset_handler: lambda: RequestPasswordResetHandler(
            account_repo=InMemoryAccountRepository(store),
            reset_ticket_repo=InMemoryResetTicketRepository(store),
            reset_token_service=PasswordResetTokenService(expiration_minutes=60),
            password_service=password_service,
            delivery=delivery,
            logger=logger,
        ),
        get_confirm_password_reset_handler: lambda: ConfirmPasswordResetHandler(
            account_repo=InMemoryAccountRepository(store),
            reset_ticket_repo=InMemoryResetTicketRepository(store),
            unit_of_work=InMemoryUnitOfWork(store),
            password_service=password_service,
            logger=logger,
        ),
        get_user_profile_handler: lambda: GetUserProfileHandler(
            **profile_repos(), logger=logger
        ),
        get_update_profile_handler: lambda: UpdateProfileHandler(
            **profile_repos(), logger=logger
        ),
        get_update_preferences_handler: lambda: UpdatePreferencesHandler(
            **profile_repos(), logger=logger
        ),
    }

    yield TestClient(app, raise_server_exceptions=False)

    app.dependency_overrides.clear()
