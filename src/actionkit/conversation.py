"""Turn state for one conversation request/response cycle."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any

from loguru import logger

from actionkit import envelope
from actionkit.config import Settings, get_settings
from actionkit.errors import EmptyResponseError, NoInputPromptLimitError, ResponseModeError
from actionkit.fragments import Fragment, ResponseItem, SimpleResponse, Suggestions, to_fragment, to_prompt
from actionkit.request import AppRequest, RequestUser, parse_request
from actionkit.response import RichResponse, TurnResponse
from actionkit.surface import AvailableSurfaces, SurfaceCapabilities
from actionkit.types import Storage, WirePayload


class User:
    """The user behind the current turn, with their persisted storage."""

    def __init__(self, raw: RequestUser | None = None) -> None:
        raw = raw or RequestUser()
        self.raw = raw
        self.id = raw.user_id
        self.locale = raw.locale
        self.storage: Storage = envelope.deserialize(raw.user_storage, field="userStorage")


class Conversation:
    """Accumulates the reply of one turn and serializes it for the platform.

    A conversation is built from one inbound request and dropped once its
    response has been sent. ``ask`` keeps the microphone open, ``close``
    ends the conversation; a turn uses one or the other.
    """

    def __init__(
        self,
        request: AppRequest | Mapping[str, Any] | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the turn state.

        Args:
            request: Parsed request, raw request mapping, or None for a fresh turn
            settings: Optional settings override

        Raises:
            InvalidRequestError: The request mapping does not match the schema
            StorageDecodeError: User storage or conversation token is malformed
            ConfigurationError: Settings from the environment are invalid
        """
        self.settings = settings or get_settings()
        self.request = parse_request(request)

        surface = self.request.surface
        self.surface = SurfaceCapabilities.from_names(surface.names() if surface else ())
        self.available_surfaces = AvailableSurfaces(
            tuple(SurfaceCapabilities.from_names(s.names()) for s in self.request.available_surfaces)
        )

        self.user = User(self.request.user)
        self._storage_snapshot: Storage = copy.deepcopy(self.user.storage)

        token = self.request.conversation.conversation_token if self.request.conversation else None
        self.data: Storage = envelope.deserialize(token, field="conversationToken")

        self.responses: list[ResponseItem] = []
        self.suggestions: list[str] = []
        self.expect_user_response: bool | None = None
        self.digested = False
        self._responded = False
        self._no_inputs: list[str | SimpleResponse] = []

    @property
    def responded(self) -> bool:
        return self._responded

    @property
    def screen(self) -> bool:
        """Whether the current surface has a screen."""
        return self.surface.screen

    @property
    def id(self) -> str | None:
        conversation = self.request.conversation
        return conversation.conversation_id if conversation else None

    @property
    def type(self) -> str | None:
        conversation = self.request.conversation
        return conversation.type if conversation else None

    @property
    def intent(self) -> str | None:
        if not self.request.inputs:
            return None
        return self.request.inputs[0].intent

    @property
    def query(self) -> str | None:
        if not self.request.inputs or not self.request.inputs[0].raw_inputs:
            return None
        return self.request.inputs[0].raw_inputs[0].query

    @property
    def no_inputs(self) -> list[str | SimpleResponse]:
        return self._no_inputs

    @no_inputs.setter
    def no_inputs(self, prompts: Iterable[str | SimpleResponse]) -> None:
        self._no_inputs = list(prompts)

    def add(self, *fragments: Any) -> Conversation:
        """Append fragments without deciding whether the turn asks or closes."""
        self._append([to_fragment(fragment) for fragment in fragments])
        return self

    def ask(self, *fragments: Any) -> Conversation:
        """Reply and keep listening for the user's answer."""
        normalized = [to_fragment(fragment) for fragment in fragments]
        if not self.responses and all(isinstance(fragment, Suggestions) for fragment in normalized):
            raise EmptyResponseError("ask() requires at least one speech or card response")
        self._set_mode(expect_user_response=True)
        logger.debug("conversation.ask id={} count={}", self.id, len(normalized))
        self._append(normalized)
        return self

    def close(self, *fragments: Any) -> Conversation:
        """Reply and end the conversation."""
        normalized = [to_fragment(fragment) for fragment in fragments]
        self._set_mode(expect_user_response=False)
        logger.debug("conversation.close id={} count={}", self.id, len(normalized))
        self._append(normalized)
        return self

    def _append(self, fragments: list[Fragment]) -> None:
        if not fragments:
            return
        if self.digested:
            logger.warning("conversation.mutate.after_digest id={} count={}", self.id, len(fragments))
        for fragment in fragments:
            if isinstance(fragment, Suggestions):
                self.suggestions.extend(fragment.titles)
            else:
                self.responses.append(fragment)
        self._responded = True

    def _set_mode(self, *, expect_user_response: bool) -> None:
        if self.expect_user_response is not None and self.expect_user_response != expect_user_response:
            current = "ask" if self.expect_user_response else "close"
            requested = "ask" if expect_user_response else "close"
            raise ResponseModeError(f"Cannot {requested}() after {current}() in the same turn")
        self.expect_user_response = expect_user_response
        self._responded = True

    def _build_no_input_prompts(self) -> list[WirePayload]:
        prompts = [to_prompt(prompt) for prompt in self._no_inputs]
        limit = self.settings.max_no_input_prompts
        if len(prompts) > limit:
            if self.settings.no_input_overflow == "reject":
                raise NoInputPromptLimitError(len(prompts), limit)
            logger.warning("conversation.no_inputs.truncated id={} count={} limit={}", self.id, len(prompts), limit)
            prompts = prompts[:limit]
        return [prompt.prompt() for prompt in prompts]

    def response(self) -> TurnResponse:
        """Build the outbound response from the current turn state.

        Calling it again re-renders the same state; nothing is appended twice.
        ``digested`` only records that a response was produced.
        """
        rich_response = RichResponse(
            items=[item.to_wire() for item in self.responses],
            suggestions=[{"title": title} for title in self.suggestions] or None,
        )
        no_input_prompts = self._build_no_input_prompts()
        user_storage = envelope.diff(self._storage_snapshot, self.user.storage)
        response = TurnResponse(
            expect_user_response=bool(self.expect_user_response),
            rich_response=rich_response,
            no_input_prompts=no_input_prompts or None,
            user_storage=user_storage,
        )
        if self.digested:
            logger.debug("conversation.response.repeat id={}", self.id)
        self.digested = True
        logger.debug(
            "conversation.response id={} expect_user_response={} items={} storage_changed={}",
            self.id,
            response.expect_user_response,
            len(rich_response.items),
            user_storage != envelope.UNCHANGED,
        )
        return response

    def serialize(self) -> WirePayload:
        """Render the full webhook body, including the conversation token."""
        return self.response().to_app_response(envelope.serialize(self.data))
