"""Application commands (CQRS write side).

Commands are immutable intent objects; handlers live in ``handlers/``.
"""

from src.application.commands.auth_commands import (
    ConfirmPasswordReset,
    LoginUser,
    RefreshAccessToken,
    RegisterUser,
    RequestPasswordReset,
)
from src.application.commands.profile_commands import UpdatePreferences, UpdateProfile

__all__ = [
    "ConfirmPasswordReset",
    "LoginUser",
    "RefreshAccessToken",
    "RegisterUser",
    "RequestPasswordReset",
    "UpdatePreferences",
    "UpdateProfile",
]
