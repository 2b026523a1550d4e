"""Pytest configuration and shared fixtures."""

import json
from typing import Any, List, Optional

import pytest
import requests
import yaml

from hover_cli.api.auth_api import AuthAPI
from hover_cli.utils.config_store import load_config
from hover_cli.utils.http_client import HttpClient

BASE_URL = "http://hover.test/api/"
ENV_KEYS = ["EMAIL", "PASSWORD", "AUTH_TOKEN", "AUTH_TOKEN_EXPIRY", "API_URL", "TIMEOUT"]


def make_response(status: int = 200, body: Any = None, url: str = BASE_URL) -> requests.Response:
    """Build a ``requests.Response`` without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.encoding = "utf-8"
    if isinstance(body, bytes):
        response._content = body
    elif body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


class FakeSession:
    """Stands in for ``requests.Session``; records calls and replays queued results."""

    def __init__(self) -> None:
        self.calls: List[dict] = []
        self._results: List[Any] = []
        self.closed = False

    def queue(self, result: Any) -> None:
        self._results.append(result)

    def _next(self) -> requests.Response:
        if not self._results:
            raise AssertionError("unexpected HTTP call")
        result = self._results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def post(self, url: str, json: Optional[dict] = None, headers=None, timeout=None) -> requests.Response:
        self.calls.append({"method": "POST", "url": url, "json": json, "headers": headers, "timeout": timeout})
        return self._next()

    def request(self, method: str, url: str, data=None, headers=None, timeout=None) -> requests.Response:
        self.calls.append({"method": method, "url": url, "data": data, "headers": headers, "timeout": timeout})
        return self._next()

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the developer's environment from overriding config values."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "hovercli.yaml"
    path.write_text(
        yaml.safe_dump({"email": "dev@example.com", "password": "s3cret"}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def config(config_file):
    return load_config(str(config_file))


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def http_client(fake_session):
    client = HttpClient(base_url=BASE_URL)
    client._session = fake_session
    return client


@pytest.fixture
def auth_api(http_client, config):
    return AuthAPI(http_client, config)
