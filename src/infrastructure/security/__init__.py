"""Security infrastructure adapters.

This package contains security-related infrastructure implementations:
- Password and reset-secret hashing (bcrypt)
- JWT access/refresh token issuance and verification
- Password reset secret generation (cryptographic hex tokens)
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.password_reset_token_service import (
    PasswordResetTokenService,
)

__all__ = [
    "BcryptPasswordService",
    "JWTService",
    "PasswordResetTokenService",
]
