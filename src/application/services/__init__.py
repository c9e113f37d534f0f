"""Application services shared across handlers."""

from src.application.services.auth_token_issuer import AuthTokenIssuer
from src.application.services.store_operation import run_store_operation

__all__ = ["AuthTokenIssuer", "run_store_operation"]
