"""API client for the custom action resource."""

from __future__ import annotations

import logging
from typing import List

import requests
from pydantic import ValidationError

from ..models import Action, ActionDetails, ActionListResponse, ActionRequest, ActionResponse
from ..utils.http_client import HoverAPIError, raise_for_api_status
from .auth_api import AuthAPI

ACTIONS_PATH = "custom_actions"


class ActionAPI:
    """Lists, reads, creates, updates and deletes custom actions."""

    def __init__(self, auth_api: AuthAPI) -> None:
        self._auth = auth_api

    def list_actions(self) -> List[Action]:
        response = self._send("GET", ACTIONS_PATH)
        return self._parse(response, ActionListResponse).data

    def get_action(self, action_id: str) -> Action:
        response = self._send("GET", f"{ACTIONS_PATH}/{action_id}")
        return self._parse(response, ActionResponse).data

    def create_action(self, details: ActionDetails) -> Action:
        payload = ActionRequest(custom_action=details).to_json()
        response = self._send("POST", ACTIONS_PATH, payload)
        return self._parse(response, ActionResponse).data

    def update_action(self, action_id: str, details: ActionDetails) -> Action:
        payload = ActionRequest(custom_action=details).to_json()
        response = self._send("PATCH", f"{ACTIONS_PATH}/{action_id}", payload)
        return self._parse(response, ActionResponse).data

    def delete_action(self, action_id: str) -> None:
        self._send("DELETE", f"{ACTIONS_PATH}/{action_id}")

    def _send(self, method: str, endpoint: str, payload: bytes | None = None) -> requests.Response:
        self._auth.authenticate()
        response = self._auth.api_request(method, endpoint, payload)
        raise_for_api_status(response)
        return response

    @staticmethod
    def _parse(response: requests.Response, model):
        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logging.error("Unexpected response body from %s: %s", response.url, exc)
            raise HoverAPIError(f"Unexpected response body: {exc}", response.status_code) from exc
