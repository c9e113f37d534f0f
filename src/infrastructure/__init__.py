"""Infrastructure layer - Adapters implementing domain protocols.

Structure:
- security/: bcrypt password hashing, JWT tokens
- rate_limit/: in-process token bucket limiter
- cache/: Redis and no-op cache adapters, user cache
- persistence/: user store adapters
- logging/: structlog adapter
- metrics/: Prometheus collectors

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
