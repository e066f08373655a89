"""Inbound request models.

Only the fields the turn state reads are declared; everything else the
platform sends is kept as extra data.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from actionkit.errors import InvalidRequestError


class WireModel(BaseModel):
    """Base for platform payloads using camelCase field names."""

    model_config = ConfigDict(extra="allow", alias_generator=to_camel, populate_by_name=True)


class CapabilityName(WireModel):
    name: str


class Surface(WireModel):
    capabilities: list[CapabilityName] = Field(default_factory=list)

    def names(self) -> list[str]:
        return [capability.name for capability in self.capabilities]


class RequestUser(WireModel):
    user_id: str | None = None
    locale: str | None = None
    user_storage: str | None = None


class ConversationInfo(WireModel):
    conversation_id: str | None = None
    type: str | None = None
    conversation_token: str | None = None


class RawInput(WireModel):
    input_type: str | None = None
    query: str | None = None


class Input(WireModel):
    intent: str | None = None
    raw_inputs: list[RawInput] = Field(default_factory=list)


class AppRequest(WireModel):
    """Parsed webhook request for one conversation turn."""

    conversation: ConversationInfo | None = None
    user: RequestUser | None = None
    inputs: list[Input] = Field(default_factory=list)
    surface: Surface | None = None
    available_surfaces: list[Surface] = Field(default_factory=list)


def parse_request(request: AppRequest | Mapping[str, Any] | None) -> AppRequest:
    """Accept a parsed model, a raw wire mapping, or nothing."""

    if request is None:
        return AppRequest()
    if isinstance(request, AppRequest):
        return request
    try:
        return AppRequest.model_validate(request)
    except ValidationError as exc:
        raise InvalidRequestError(f"Invalid app request: {exc}") from exc
