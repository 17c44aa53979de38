"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, TokenCodecProtocol
    from src.domain.protocols import AccountRepository, ResetTicketRepository
"""

# Service protocols
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.reset_token_delivery_protocol import (
    ResetTokenDeliveryProtocol,
)
from src.domain.protocols.reset_token_service_protocol import (
    ResetTokenServiceProtocol,
)
from src.domain.protocols.token_codec_protocol import TokenCodecProtocol
from src.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol

# Repository protocols
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.preferences_repository import PreferencesRepository
from src.domain.protocols.profile_repository import ProfileRepository
from src.domain.protocols.reset_ticket_repository import ResetTicketRepository

__all__ = [
    # Service protocols
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "ResetTokenDeliveryProtocol",
    "ResetTokenServiceProtocol",
    "TokenCodecProtocol",
    "UnitOfWorkProtocol",
    # Repository protocols
    "AccountRepository",
    "PreferencesRepository",
    "ProfileRepository",
    "ResetTicketRepository",
]
