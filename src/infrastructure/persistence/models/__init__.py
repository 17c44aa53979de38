"""Database models for persistence layer.

SQLAlchemy models mapping to database tables. Infrastructure concern only:
the domain layer never imports these; repositories map them to entities.

Models:
    - account.py: accounts (credentials + identity)
    - profile.py: profiles (one per account)
    - preferences.py: preferences (one per account)
    - reset_ticket.py: reset_tickets (password reset tickets)
"""

from src.infrastructure.persistence.models.account import AccountModel
from src.infrastructure.persistence.models.preferences import PreferencesModel
from src.infrastructure.persistence.models.profile import ProfileModel
from src.infrastructure.persistence.models.reset_ticket import ResetTicketModel

__all__ = [
    "AccountModel",
    "PreferencesModel",
    "ProfileModel",
    "ResetTicketModel",
]
