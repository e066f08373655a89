"""Outbound response models."""

from __future__ import annotations

from pydantic import Field

from actionkit.envelope import UNCHANGED
from actionkit.request import WireModel
from actionkit.types import WirePayload

TEXT_INTENT = "actions.intent.TEXT"


class RichResponse(WireModel):
    items: list[WirePayload] = Field(default_factory=list)
    suggestions: list[WirePayload] | None = None


class TurnResponse(WireModel):
    """Assembled reply of one turn, in the platform's field layout."""

    expect_user_response: bool
    rich_response: RichResponse = Field(default_factory=RichResponse)
    no_input_prompts: list[WirePayload] | None = None
    user_storage: str = UNCHANGED

    def to_wire(self) -> WirePayload:
        """Render the camelCase payload, leaving out absent optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_app_response(self, conversation_token: str) -> WirePayload:
        """Render the full webhook body the platform expects for this turn.

        An asking turn carries the prompt and the conversation token; a
        closing turn only carries the final response. ``userStorage`` is
        left out when it did not change.
        """
        rich_response = self.rich_response.model_dump(by_alias=True, exclude_none=True)
        payload: WirePayload = {"expectUserResponse": self.expect_user_response}
        if self.expect_user_response:
            input_prompt: WirePayload = {"richInitialPrompt": rich_response}
            if self.no_input_prompts:
                input_prompt["noInputPrompts"] = self.no_input_prompts
            payload["expectedInputs"] = [
                {
                    "inputPrompt": input_prompt,
                    "possibleIntents": [{"intent": TEXT_INTENT}],
                }
            ]
            payload["conversationToken"] = conversation_token
        else:
            payload["finalResponse"] = {"richResponse": rich_response}
        if self.user_storage != UNCHANGED:
            payload["userStorage"] = self.user_storage
        return payload
