"""User DTOs returned by profile handlers."""

from dataclasses import dataclass

from src.domain.entities.account import Account
from src.domain.entities.preferences import Preferences
from src.domain.entities.profile import Profile


@dataclass(frozen=True, kw_only=True)
class UserWithProfile:
    """Account with its profile and preferences.

    Attributes:
        account: Account (no password hash).
        profile: Profile record.
        preferences: Preferences record.
    """

    account: Account
    profile: Profile
    preferences: Preferences
