"""User profile router.

Every route requires a bearer access token whose subject equals the
``{user_id}`` path parameter (403 otherwise, checked before store access).

Endpoints:
    GET /users/{user_id}              - Account with profile and preferences
    PUT /users/{user_id}/profile      - Partial profile update
    PUT /users/{user_id}/preferences  - Partial preferences update
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.update_preferences_handler import (
    UpdatePreferencesHandler,
)
from src.application.commands.handlers.update_profile_handler import (
    UpdateProfileHandler,
)
from src.application.commands.profile_commands import (
    UpdatePreferences,
    UpdateProfile,
)
from src.application.queries.handlers.get_user_profile_handler import (
    GetUserProfileHandler,
)
from src.application.queries.user_queries import GetUserProfile
from src.core.container import (
    get_update_preferences_handler,
    get_update_profile_handler,
    get_user_profile_handler,
)
from src.core.result import Failure, Success
from src.presentation.errors import ErrorResponseBuilder
from src.presentation.middleware import CurrentUser, get_trace_id, require_owner
from src.schemas.user_schemas import (
    PreferencesUpdateRequest,
    ProfileUpdateRequest,
    UserWithProfileResponse,
)

users_router = APIRouter(prefix="/users", tags=["Users"])

Owner = Annotated[CurrentUser, Depends(require_owner)]


@users_router.get("/{user_id}", response_model=UserWithProfileResponse)
async def get_user(
    request: Request,
    user_id: UUID,
    current_user: Owner,
    handler: GetUserProfileHandler = Depends(get_user_profile_handler),
) -> UserWithProfileResponse | JSONResponse:
    """Get account, profile and preferences.

    GET /users/{user_id} → 200 OK
    """
    result = await handler.handle(GetUserProfile(user_id=user_id))

    match result:
        case Success(value=dto):
            return UserWithProfileResponse.from_dto(dto)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@users_router.put("/{user_id}/profile", response_model=UserWithProfileResponse)
async def update_profile(
    request: Request,
    user_id: UUID,
    data: ProfileUpdateRequest,
    current_user: Owner,
    handler: UpdateProfileHandler = Depends(get_update_profile_handler),
) -> UserWithProfileResponse | JSONResponse:
    """Apply the supplied profile fields.

    PUT /users/{user_id}/profile → 200 OK
    """
    command = UpdateProfile(user_id=user_id, changes=data.to_changes())
    result = await handler.handle(command)

    match result:
        case Success(value=dto):
            return UserWithProfileResponse.from_dto(dto)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@users_router.put("/{user_id}/preferences", response_model=UserWithProfileResponse)
async def update_preferences(
    request: Request,
    user_id: UUID,
    data: PreferencesUpdateRequest,
    current_user: Owner,
    handler: UpdatePreferencesHandler = Depends(get_update_preferences_handler),
) -> UserWithProfileResponse | JSONResponse:
    """Apply the supplied preference fields.

    PUT /users/{user_id}/preferences → 200 OK
    """
    command = UpdatePreferences(user_id=user_id, changes=data.to_changes())
    result = await handler.handle(command)

    match result:
        case Success(value=dto):
            return UserWithProfileResponse.from_dto(dto)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )
