"""Domain enums package."""

from src.domain.enums.token_type import TokenType

__all__ = ["TokenType"]
