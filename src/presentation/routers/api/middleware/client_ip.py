"""Client address resolution shared by rate limiting, logging and audit."""

from starlette.requests import Request


def get_client_ip(request: Request, trust_forwarded_for: bool = False) -> str:
    """Extract the client IP address from a request.

    ``X-Forwarded-For`` is only honored when the service runs behind a
    proxy that sets it (``trust_forwarded_for``); otherwise any client could
    pick its own rate-limit identity. The first address in the header is
    the original client.

    Returns:
        Client IP address, or "unknown" when the transport has none.
    """
    if trust_forwarded_for:
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            first = forwarded_for.split(",")[0].strip()
            if first:
                return first

    if request.client:
        return request.client.host

    return "unknown"
