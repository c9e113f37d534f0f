"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (RegisterUser, UpdateUser). Each command
has a corresponding handler in ``handlers/``.
"""

from src.application.commands.auth_commands import (
    LoginUser,
    RefreshAccessToken,
    RegisterUser,
)
from src.application.commands.user_commands import DeleteUser, UpdateUser

__all__ = [
    "DeleteUser",
    "LoginUser",
    "RefreshAccessToken",
    "RegisterUser",
    "UpdateUser",
]
