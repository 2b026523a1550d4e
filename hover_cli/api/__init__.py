"""API layer for authentication and custom actions."""

from .action_api import ActionAPI
from .auth_api import AuthAPI

__all__ = ["AuthAPI", "ActionAPI"]
