"""Domain enums."""

from src.domain.enums.token_type import TokenType

__all__ = ["TokenType"]
