"""User profile request/response schemas.

Endpoints:
    GET /users/{id}              - Account with profile and preferences
    PUT /users/{id}/profile      - Partial profile update
    PUT /users/{id}/preferences  - Partial preferences update

Update bodies are partial: omitted fields (and explicit nulls) leave the
stored value unchanged.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.application.dtos import UserWithProfile
from src.domain.entities.preferences import Preferences, PreferencesChanges
from src.domain.entities.profile import Profile, ProfileChanges
from src.schemas.auth_schemas import UserResponse


class ProfileResponse(BaseModel):
    """Profile representation."""

    id: UUID
    user_id: UUID
    avatar_url: str | None
    level: int
    experience: int
    wins: int
    losses: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            id=profile.id,
            user_id=profile.account_id,
            avatar_url=profile.avatar_url,
            level=profile.level,
            experience=profile.experience,
            wins=profile.wins,
            losses=profile.losses,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class PreferencesResponse(BaseModel):
    """Preferences representation."""

    id: UUID
    user_id: UUID
    notifications_enabled: bool
    language: str
    theme: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, preferences: Preferences) -> "PreferencesResponse":
        return cls(
            id=preferences.id,
            user_id=preferences.account_id,
            notifications_enabled=preferences.notifications_enabled,
            language=preferences.language,
            theme=preferences.theme,
            created_at=preferences.created_at,
            updated_at=preferences.updated_at,
        )


class UserWithProfileResponse(BaseModel):
    """Account with its profile and preferences."""

    user: UserResponse
    profile: ProfileResponse
    preferences: PreferencesResponse

    @classmethod
    def from_dto(cls, dto: UserWithProfile) -> "UserWithProfileResponse":
        return cls(
            user=UserResponse.from_entity(dto.account),
            profile=ProfileResponse.from_entity(dto.profile),
            preferences=PreferencesResponse.from_entity(dto.preferences),
        )


class ProfileUpdateRequest(BaseModel):
    """Partial profile update (PUT /users/{id}/profile)."""

    avatar_url: str | None = Field(None, max_length=2048, description="Avatar URL")
    level: int | None = Field(None, ge=1, description="Player level")
    experience: int | None = Field(None, ge=0, description="Experience points")
    wins: int | None = Field(None, ge=0, description="Win counter")
    losses: int | None = Field(None, ge=0, description="Loss counter")

    model_config = ConfigDict(
        json_schema_extra={"example": {"level": 5, "experience": 1000}}
    )

    def to_changes(self) -> ProfileChanges:
        return ProfileChanges(**self.model_dump(exclude_none=True))


class PreferencesUpdateRequest(BaseModel):
    """Partial preferences update (PUT /users/{id}/preferences)."""

    notifications_enabled: bool | None = Field(None, description="Notification flag")
    language: str | None = Field(None, min_length=1, max_length=16, description="Language code")
    theme: str | None = Field(None, min_length=1, max_length=32, description="Theme name")

    model_config = ConfigDict(
        json_schema_extra={"example": {"theme": "dark", "language": "fr"}}
    )

    def to_changes(self) -> PreferencesChanges:
        return PreferencesChanges(**self.model_dump(exclude_none=True))
