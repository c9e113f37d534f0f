"""Domain value objects.

Usage:
    from src.domain.value_objects import TokenClaims, RateLimitRule, AuditRecord
"""

from src.domain.value_objects.audit_record import AuditRecord
from src.domain.value_objects.rate_limit_rule import RateLimitRule
from src.domain.value_objects.token_claims import SUBJECT_TYPE_USER_AUTH, TokenClaims

__all__ = [
    "AuditRecord",
    "RateLimitRule",
    "SUBJECT_TYPE_USER_AUTH",
    "TokenClaims",
]
