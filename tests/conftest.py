from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest

from actionkit.config import Settings

CONVERSATION_ID = "1234"
USER_ID = "abcd"


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOG_LEVEL", "LOG_PROFILE", "MAX_NO_INPUT_PROMPTS", "NO_INPUT_OVERFLOW"):
        monkeypatch.delenv(f"ACTIONKIT_{name}", raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


def _build_request(conv_type: str = "ACTIVE", intent: str = "example.foo", **overrides: Any) -> dict[str, Any]:
    request: dict[str, Any] = {
        "conversation": {
            "conversationId": CONVERSATION_ID,
            "type": conv_type,
        },
        "user": {
            "userId": USER_ID,
            "locale": "en_US",
        },
        "inputs": [
            {
                "intent": intent,
                "rawInputs": [
                    {
                        "inputType": "KEYBOARD",
                        "query": "Talk to my test app",
                    }
                ],
            }
        ],
        "surface": {
            "capabilities": [
                {"name": "actions.capability.SCREEN_OUTPUT"},
                {"name": "actions.capability.MEDIA_RESPONSE_AUDIO"},
                {"name": "actions.capability.WEB_BROWSER"},
                {"name": "actions.capability.AUDIO_OUTPUT"},
            ]
        },
        "availableSurfaces": [
            {
                "capabilities": [
                    {"name": "actions.capability.SCREEN_OUTPUT"},
                    {"name": "actions.capability.AUDIO_OUTPUT"},
                ]
            }
        ],
    }
    request.update(overrides)
    return request


def _user_storage(data: dict[str, Any]) -> str:
    return json.dumps({"data": data}, separators=(",", ":"))


@pytest.fixture
def nested_data() -> dict[str, Any]:
    return {"a": "1", "b": "2", "c": {"d": "3", "e": "4"}}


@pytest.fixture
def build_request() -> Callable[..., dict[str, Any]]:
    return _build_request


@pytest.fixture
def user_storage() -> Callable[[dict[str, Any]], str]:
    return _user_storage
