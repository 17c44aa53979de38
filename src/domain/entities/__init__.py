"""Domain entities package."""

from src.domain.entities.account import Account, AccountCredentials
from src.domain.entities.preferences import Preferences, PreferencesChanges
from src.domain.entities.profile import Profile, ProfileChanges
from src.domain.entities.reset_ticket import ResetTicket

__all__ = [
    "Account",
    "AccountCredentials",
    "Preferences",
    "PreferencesChanges",
    "Profile",
    "ProfileChanges",
    "ResetTicket",
]
