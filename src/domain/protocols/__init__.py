"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, UserRepository
"""

from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.rate_limit_protocol import RateLimitProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from src.domain.protocols.user_cache_protocol import UserCacheProtocol
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    "CacheProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "RateLimitProtocol",
    "TokenGenerationProtocol",
    "UserCacheProtocol",
    "UserRepository",
]
