"""Data models for authentication and custom actions."""

from .action_models import Action, ActionDetails, ActionListResponse, ActionRequest, ActionResponse
from .auth_models import AuthToken, Credentials

__all__ = [
    "Action",
    "ActionDetails",
    "ActionListResponse",
    "ActionRequest",
    "ActionResponse",
    "AuthToken",
    "Credentials",
]
