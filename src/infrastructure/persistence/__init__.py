"""Persistence adapters (user store)."""
