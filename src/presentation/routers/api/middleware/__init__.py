"""Request middleware and the bearer-token dependency.

Order on the way in (outermost first):
    RequestIDMiddleware -> MetricsMiddleware -> SecurityHeadersMiddleware
    -> RateLimitMiddleware -> CORSMiddleware -> RequestLoggingMiddleware
    -> AuditLogMiddleware -> RecoveryMiddleware -> route (get_current_user)
"""

from src.presentation.routers.api.middleware.audit_log_middleware import (
    AuditLogMiddleware,
    should_audit,
)
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from src.presentation.routers.api.middleware.client_ip import get_client_ip
from src.presentation.routers.api.middleware.metrics_middleware import MetricsMiddleware
from src.presentation.routers.api.middleware.rate_limit_middleware import (
    RateLimitMiddleware,
)
from src.presentation.routers.api.middleware.recovery_middleware import (
    RecoveryMiddleware,
)
from src.presentation.routers.api.middleware.request_id_middleware import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    get_request_id,
)
from src.presentation.routers.api.middleware.request_logging_middleware import (
    RequestLoggingMiddleware,
)
from src.presentation.routers.api.middleware.security_headers_middleware import (
    SecurityHeadersMiddleware,
)

__all__ = [
    "REQUEST_ID_HEADER",
    "AuditLogMiddleware",
    "CurrentUser",
    "MetricsMiddleware",
    "RateLimitMiddleware",
    "RecoveryMiddleware",
    "RequestIDMiddleware",
    "RequestLoggingMiddleware",
    "SecurityHeadersMiddleware",
    "get_client_ip",
    "get_current_user",
    "get_request_id",
    "should_audit",
]
