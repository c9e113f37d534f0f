"""Audit record value object.

One entry per audited request, emitted by the audit-log middleware.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditRecord:
    """Structured audit entry (immutable).

    Attributes:
        request_id: Correlation id of the request.
        method: HTTP method.
        path: Request path.
        status: Response status code.
        latency_ms: Handling time in milliseconds.
        client_ip: Client identity as seen by the server.
        user_agent: User-Agent header, empty when absent.
        user_id: Authenticated subject, when the bearer gate ran.
        email: Authenticated email, when the bearer gate ran.
    """

    request_id: str | None
    method: str
    path: str
    status: int
    latency_ms: float
    client_ip: str
    user_agent: str
    user_id: str | None = None
    email: str | None = None

    @property
    def level(self) -> str:
        """Log level for this record: error for 5xx, warning for 4xx, else info."""
        if self.status >= 500:
            return "error"
        if self.status >= 400:
            return "warning"
        return "info"

    def to_log_context(self) -> dict[str, Any]:
        """Fields for structured logging, omitting unset identity fields."""
        return {key: value for key, value in asdict(self).items() if value is not None}
