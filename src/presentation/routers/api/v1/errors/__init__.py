"""Error mapping and exception handlers for the presentation layer.

Exports:
    ErrorResponseBuilder: Builds error envelopes from domain errors
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from src.presentation.routers.api.v1.errors.error_response_builder import (
    INTERNAL_ERROR_MESSAGE,
    ErrorResponseBuilder,
)
from src.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = [
    "INTERNAL_ERROR_MESSAGE",
    "ErrorResponseBuilder",
    "register_exception_handlers",
]
