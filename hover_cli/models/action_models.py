"""Pydantic models for the custom action resource."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer


class ActionDetails(BaseModel):
    """Writable fields of a custom action. Empty fields are left out of the JSON body."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    root_code: Optional[str] = None
    transport_type: Optional[str] = None
    world_operators: Optional[List[str]] = Field(default=None, alias="world_operator_ids")

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler) -> Dict[str, Any]:
        data = handler(self)
        return {key: value for key, value in data.items() if value not in (None, "", [])}


class ActionRequest(BaseModel):
    """Body sent when creating or updating an action."""

    custom_action: ActionDetails

    def to_json(self) -> bytes:
        return self.model_dump_json(by_alias=True).encode("utf-8")


class Action(BaseModel):
    id: str
    attributes: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("attributes", mode="before")
    @classmethod
    def _default_attributes(cls, value: Any) -> Any:
        return {} if value is None else value


class ActionListResponse(BaseModel):
    data: List[Action] = Field(default_factory=list)


class ActionResponse(BaseModel):
    data: Action
