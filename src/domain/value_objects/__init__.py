"""Domain value objects (immutable, no identity)."""

from src.domain.value_objects.token_claims import TokenClaims

__all__ = ["TokenClaims"]
