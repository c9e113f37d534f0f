"""Annotated types with centralized validation.

Define validation once, use everywhere: request schemas and commands share
these types, so a value that reaches a handler has already been checked.

Usage:
    from src.domain.types import Email, Password, Username

    class RegisterRequest(BaseModel):
        email: Email
        password: Password
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_email,
    validate_optional_url,
    validate_strong_password,
    validate_username,
)

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address",
        examples=["user@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address, normalized to lowercase."""

Username = Annotated[
    str,
    Field(
        min_length=1,
        max_length=50,
        description="Username (letters, digits, '_', '.', '-')",
        examples=["jane_doe"],
    ),
    AfterValidator(validate_username),
]

Password = Annotated[
    str,
    Field(
        min_length=8,
        max_length=72,
        description="Password with strength requirements",
        examples=["SecurePass123!"],
    ),
    AfterValidator(validate_strong_password),
]
"""Password with strength validation.

Requirements:
- 8 to 72 bytes
- At least one uppercase letter
- At least one lowercase letter
- At least one digit
- At least one special character
"""

LoginPassword = Annotated[
    str,
    Field(
        min_length=1,
        max_length=256,
        description="Password as entered at login (not strength-checked)",
    ),
]

PersonName = Annotated[
    str,
    Field(max_length=100, description="First or last name"),
]

AvatarUrl = Annotated[
    str,
    Field(max_length=500, description="Avatar image URL"),
    AfterValidator(validate_optional_url),
]
