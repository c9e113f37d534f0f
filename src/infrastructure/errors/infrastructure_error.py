"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (cache).

Architecture:
- Infrastructure catches exceptions and maps them to DomainError subclasses
- Infrastructure errors inherit from DomainError (not Exception)
- InfrastructureErrorCode is kept for internal tracking only
"""

from dataclasses import dataclass

from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        infrastructure_code: Original infrastructure error code.
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Cache-specific error (wraps Redis and serialization failures)."""

    pass
