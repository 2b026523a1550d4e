"""Token caching and authenticated requests against the Hover API."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import requests

from ..models import AuthToken, Credentials
from ..utils.config_store import ConfigStore
from ..utils.http_client import (
    JSON_CONTENT_TYPE,
    AuthenticationError,
    HttpClient,
    raise_for_api_status,
)

AUTHENTICATE_PATH = "authenticate"
# The API does not report token lifetimes; tokens are assumed valid for this long.
TOKEN_TTL = timedelta(hours=2)

TOKEN_KEY = "auth_token"
TOKEN_EXPIRY_KEY = "auth_token_expiry"


class AuthAPI:
    """Keeps a valid token in the config store and signs requests with it."""

    def __init__(self, http_client: HttpClient, config: ConfigStore, token_ttl: timedelta = TOKEN_TTL) -> None:
        self._client = http_client
        self._config = config
        self.token_ttl = token_ttl

    def cached_token(self) -> AuthToken:
        return AuthToken(
            value=self._config.get_string(TOKEN_KEY),
            expiry=self._config.get_time(TOKEN_EXPIRY_KEY),
        )

    def authenticate(self, force: bool = False) -> AuthToken:
        """Return a usable token, requesting a new one only when the cached one expired.

        The config store is only touched after the server hands back a token;
        a failed request leaves the cached values as they were. If saving the
        config fails the new token is still held in memory and the error is
        raised to the caller.
        """

        cached = self.cached_token()
        if not force and cached.is_valid(datetime.now(timezone.utc)):
            logging.debug("Reusing cached token (expires %s)", cached.expiry)
            return cached

        credentials = Credentials(
            email=self._config.get_string("email"),
            password=self._config.get_string("password"),
        )
        logging.info("Requesting a new token for %s", credentials.email)
        response = self._client.post_json(AUTHENTICATE_PATH, credentials.model_dump())
        raise_for_api_status(response)

        try:
            data = response.json()
        except ValueError as exc:
            raise AuthenticationError("Authenticate response is not valid JSON.", response.status_code) from exc
        value = data.get(TOKEN_KEY) if isinstance(data, dict) else None
        if not value or not isinstance(value, str):
            raise AuthenticationError("Authenticate response is missing auth_token.", response.status_code)

        token = AuthToken(value=value, expiry=datetime.now(timezone.utc).astimezone() + self.token_ttl)
        self._config.set(TOKEN_KEY, token.value)
        self._config.set(TOKEN_EXPIRY_KEY, token.expiry)
        self._config.write_config()
        logging.info("Authenticated; token valid until %s", token.expiry.isoformat(timespec="seconds"))
        return token

    def clear_token(self) -> None:
        """Forget the cached token so the next call authenticates again."""

        self._config.set(TOKEN_KEY, "")
        self._config.set(TOKEN_EXPIRY_KEY, "")
        self._config.write_config()
        logging.info("Cleared cached token in %s", self._config.path)

    def api_request(self, method: str, endpoint: str, payload: Optional[bytes] = None) -> requests.Response:
        """Send one request carrying the cached token as the Authorization header.

        The token is sent verbatim with no scheme prefix. This does not call
        :meth:`authenticate` and does not look at the response.
        """

        headers = {
            "Content-Type": JSON_CONTENT_TYPE,
            "Authorization": self._config.get_string(TOKEN_KEY),
        }
        return self._client.request(method, endpoint, payload, headers=headers)
