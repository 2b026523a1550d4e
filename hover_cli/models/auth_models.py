"""Models related to authentication and cached tokens."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel


class Credentials(BaseModel):
    """Email/password pair posted to the authenticate endpoint."""

    email: str
    password: str


class AuthToken(BaseModel):
    """A token together with the expiry the client assumes for it."""

    value: str
    expiry: Optional[datetime] = None

    def is_valid(self, now: Optional[datetime] = None) -> bool:
        if not self.value or self.expiry is None:
            return False
        current = now or datetime.now(timezone.utc)
        return current < self.expiry
