"""Authentication router.

Registration, login, token refresh/validation and the password-reset
protocol. Handlers return Result types; failures are rendered as RFC 9457
Problem Details via ErrorResponseBuilder.

Endpoints:
    POST /auth/register                 - Create account, profile, preferences
    POST /auth/login                    - Exchange credentials for tokens
    POST /auth/refresh                  - Exchange refresh token for access token
    POST /auth/validate                 - Verify a token of either type
    POST /auth/request-password-reset   - Issue a reset secret (always 200)
    POST /auth/reset-password           - Consume a reset secret, set password
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import (
    ConfirmPasswordReset,
    LoginUser,
    RefreshAccessToken,
    RegisterUser,
    RequestPasswordReset,
)
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
from src.application.queries.user_queries import ValidateToken
from src.core.container import (
    get_confirm_password_reset_handler,
    get_login_user_handler,
    get_refresh_token_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
    get_validate_token_handler,
)
from src.core.result import Failure, Success
from src.presentation.errors import ErrorResponseBuilder
from src.presentation.middleware import get_trace_id
from src.schemas.auth_schemas import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    PasswordResetConfirmRequest,
    PasswordResetRequest,
    RefreshRequest,
    RefreshResponse,
    RegisterRequest,
    ValidateTokenRequest,
    ValidateTokenResponse,
)

auth_router = APIRouter(prefix="/auth", tags=["Authentication"])


@auth_router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
)
async def register(
    request: Request,
    data: RegisterRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> AuthResponse | JSONResponse:
    """Register a new account.

    POST /auth/register → 201 Created

    Returns:
        AuthResponse with the account and a fresh token pair.
        JSONResponse with error on failure (400/409).
    """
    command = RegisterUser(
        email=data.email,
        password=data.password,
        username=data.username,
    )
    result = await handler.handle(command)

    match result:
        case Success(value=auth_result):
            return AuthResponse.from_result(auth_result)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@auth_router.post("/login", response_model=AuthResponse)
async def login(
    request: Request,
    data: LoginRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> AuthResponse | JSONResponse:
    """Authenticate with email and password.

    POST /auth/login → 200 OK

    Unknown email and wrong password produce the same 401 response.
    """
    result = await handler.handle(LoginUser(email=data.email, password=data.password))

    match result:
        case Success(value=auth_result):
            return AuthResponse.from_result(auth_result)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@auth_router.post("/refresh", response_model=RefreshResponse)
async def refresh(
    request: Request,
    data: RefreshRequest,
    handler: RefreshAccessTokenHandler = Depends(get_refresh_token_handler),
) -> RefreshResponse | JSONResponse:
    """Exchange a refresh token for a new access token.

    POST /auth/refresh → 200 OK

    The refresh token itself is not rotated.
    """
    result = await handler.handle(RefreshAccessToken(refresh_token=data.refresh_token))

    match result:
        case Success(value=token_result):
            return RefreshResponse(token=token_result.access_token)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@auth_router.post("/validate", response_model=ValidateTokenResponse)
async def validate(
    request: Request,
    data: ValidateTokenRequest,
    handler: ValidateTokenHandler = Depends(get_validate_token_handler),
) -> ValidateTokenResponse | JSONResponse:
    """Verify a token and return the identity it carries.

    POST /auth/validate → 200 OK (401 when expired or invalid)
    """
    result = await handler.handle(ValidateToken(token=data.token))

    match result:
        case Success(value=validation):
            return ValidateTokenResponse(
                valid=validation.valid,
                user_id=validation.user_id,
                email=validation.email,
                username=validation.username,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@auth_router.post("/request-password-reset", response_model=MessageResponse)
async def request_password_reset(
    request: Request,
    data: PasswordResetRequest,
    handler: RequestPasswordResetHandler = Depends(
        get_request_password_reset_handler
    ),
) -> MessageResponse | JSONResponse:
    """Request a password reset secret.

    POST /auth/request-password-reset → 200 OK

    The response is identical whether or not the email is registered.
    """
    result = await handler.handle(RequestPasswordReset(email=data.email))

    match result:
        case Success(value=response):
            return MessageResponse(message=response.message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@auth_router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    request: Request,
    data: PasswordResetConfirmRequest,
    handler: ConfirmPasswordResetHandler = Depends(
        get_confirm_password_reset_handler
    ),
) -> MessageResponse | JSONResponse:
    """Consume a reset secret and set a new password.

    POST /auth/reset-password → 200 OK (400 for weak password or bad secret)
    """
    command = ConfirmPasswordReset(token=data.token, new_password=data.new_password)
    result = await handler.handle(command)

    match result:
        case Success(value=response):
            return MessageResponse(message=response.message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )
