"""Shared HTTP helpers for the Hover API."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

API_BASE = "http://localhost:3000/api/"
JSON_CONTENT_TYPE = "application/json"


class HoverAPIError(Exception):
    """Raised when the Hover API answers with an unexpected status or body."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(HoverAPIError):
    """Raised when the Hover API rejects authentication."""


class HttpClient:
    """Sends requests to the Hover API. One attempt per call, no retries."""

    def __init__(self, base_url: str = API_BASE, timeout: Optional[float] = None) -> None:
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.timeout = timeout
        self._session = requests.Session()

    def build_url(self, endpoint: str) -> str:
        return self.base_url + endpoint.lstrip("/")

    def post_json(self, path: str, payload: Dict[str, Any]) -> requests.Response:
        """POST a JSON body to an API path."""

        url = self.build_url(path)
        try:
            return self._session.post(
                url,
                json=payload,
                headers={"Content-Type": JSON_CONTENT_TYPE},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logging.error("HTTP POST to %s failed: %s", url, exc)
            raise

    def request(
        self,
        method: str,
        endpoint: str,
        payload: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        """Send a raw request; the caller inspects the returned response."""

        url = self.build_url(endpoint)
        try:
            return self._session.request(
                method.upper(),
                url,
                data=payload,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logging.error("HTTP %s to %s failed: %s", method.upper(), url, exc)
            raise

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def raise_for_api_status(response: requests.Response) -> None:
    """Map a non-2xx response onto the client's error types."""

    status = response.status_code
    if status in {401, 403}:
        logging.error("Authentication failed (status %s).", status)
        raise AuthenticationError("Hover API rejected the credentials or token.", status)
    if not 200 <= status < 300:
        body = (response.text or "").strip()
        raise HoverAPIError(f"Hover API returned status {status}: {body[:200]}", status)
