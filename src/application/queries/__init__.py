"""Application queries (CQRS read side)."""

from src.application.queries.user_queries import GetUserProfile, ValidateToken

__all__ = ["GetUserProfile", "ValidateToken"]
