"""Result types for railway-oriented error handling.

Every component boundary (hasher, token service, handlers, cache) returns a
Result instead of raising. Callers branch on the variant with ``match``.

Usage:
    def parse_page(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Failure(error="page must be numeric")
        return Success(value=int(raw))

    match parse_page("2"):
        case Success(value=page):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: Produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Error describing the failure.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
