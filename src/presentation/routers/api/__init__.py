"""Versioned API routers and request middleware."""
