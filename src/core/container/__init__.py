"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_user_repository, ...

The container is organized into modules:
- infrastructure: Core services (logging, cache, security, user store)
- auth_handlers: Register / login / refresh handler factories
- user_handlers: Profile and user management handler factories

Application-scoped services are ``lru_cache`` singletons; call
``reset_container()`` to drop them (tests, settings changes).
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_auth_token_issuer,
    get_cache,
    get_logger,
    get_login_timing_hash,
    get_password_service,
    get_token_service,
    get_user_cache,
    get_user_repository,
    reset_container,
)

# Auth handlers
from src.core.container.auth_handlers import (
    get_login_user_handler,
    get_refresh_token_handler,
    get_register_user_handler,
)

# User management handlers
from src.core.container.user_handlers import (
    get_delete_user_handler,
    get_get_user_handler,
    get_list_users_handler,
    get_update_user_handler,
)

__all__ = [
    # Infrastructure
    "get_auth_token_issuer",
    "get_cache",
    "get_logger",
    "get_login_timing_hash",
    "get_password_service",
    "get_token_service",
    "get_user_cache",
    "get_user_repository",
    "reset_container",
    # Auth handlers
    "get_register_user_handler",
    "get_login_user_handler",
    "get_refresh_token_handler",
    # User handlers
    "get_get_user_handler",
    "get_list_users_handler",
    "get_update_user_handler",
    "get_delete_user_handler",
]
