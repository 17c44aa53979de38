"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from src.infrastructure.persistence.repositories.preferences_repository import (
    PreferencesRepository,
)
from src.infrastructure.persistence.repositories.profile_repository import (
    ProfileRepository,
)
from src.infrastructure.persistence.repositories.reset_ticket_repository import (
    ResetTicketRepository,
)

__all__ = [
    "AccountRepository",
    "PreferencesRepository",
    "ProfileRepository",
    "ResetTicketRepository",
]
