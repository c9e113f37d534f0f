"""Token flavors written into the ``token_type`` claim."""

from enum import Enum


class TokenType(str, Enum):
    """Kind of bearer token.

    ACCESS tokens are short-lived and authorize API calls. REFRESH tokens are
    long-lived and only exchanged for a new token pair.
    """

    ACCESS = "access"
    REFRESH = "refresh"
