"""Domain-specific error types.

Usage:
    from src.domain.errors import SecurityError, PersistenceError
"""

from src.domain.errors.persistence_error import (
    DuplicateRecordError,
    PersistenceError,
    RepositoryError,
)
from src.domain.errors.security_error import SecurityError

__all__ = [
    "DuplicateRecordError",
    "PersistenceError",
    "RepositoryError",
    "SecurityError",
]
