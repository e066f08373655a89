"""Response fragment value objects.

The fragment vocabulary is closed: speech strings, ``SimpleResponse``,
``BasicCard`` and ``Suggestions``. ``to_fragment`` is the single entry
point that turns caller arguments into fragments and rejects anything else.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from actionkit.errors import FragmentError, UnsupportedFragmentError
from actionkit.types import WirePayload


def exclude_none(d: WirePayload) -> WirePayload:
    return {k: v for k, v in d.items() if v is not None}


@dataclass(frozen=True)
class SimpleResponse:
    """Spoken text with an optional on-screen variant."""

    text_to_speech: str
    display_text: str | None = None

    def prompt(self) -> WirePayload:
        """Render as a bare prompt, the shape used by no-input reprompts."""
        return exclude_none({"textToSpeech": self.text_to_speech, "displayText": self.display_text})

    def to_wire(self) -> WirePayload:
        return {"simpleResponse": self.prompt()}


@dataclass(frozen=True)
class Image:
    url: str
    alt: str = ""
    height: int | None = None
    width: int | None = None

    def to_wire(self) -> WirePayload:
        return exclude_none(
            {
                "url": self.url,
                "accessibilityText": self.alt,
                "height": self.height,
                "width": self.width,
            }
        )


@dataclass(frozen=True)
class Button:
    """Link button opening a URL."""

    title: str
    url: str

    def to_wire(self) -> WirePayload:
        return {"title": self.title, "openUrlAction": {"url": self.url}}


class ImageDisplay(StrEnum):
    DEFAULT = "DEFAULT"
    WHITE = "WHITE"
    CROPPED = "CROPPED"


@dataclass(frozen=True)
class BasicCard:
    """Structured card with optional image and link buttons."""

    title: str | None = None
    subtitle: str | None = None
    text: str | None = None
    image: Image | None = None
    buttons: Button | Sequence[Button] = ()
    display: ImageDisplay | None = None

    def __post_init__(self) -> None:
        if self.text is None and self.image is None:
            raise FragmentError("BasicCard requires text or an image")
        # Accept a single button the same way as a list of them.
        if isinstance(self.buttons, Button):
            object.__setattr__(self, "buttons", (self.buttons,))
        else:
            object.__setattr__(self, "buttons", tuple(self.buttons))

    def to_wire(self) -> WirePayload:
        card = exclude_none(
            {
                "title": self.title,
                "subtitle": self.subtitle,
                "formattedText": self.text,
                "image": self.image.to_wire() if self.image else None,
                "imageDisplayOptions": self.display.value if self.display else None,
            }
        )
        if self.buttons:
            card["buttons"] = [button.to_wire() for button in self.buttons]
        return {"basicCard": card}


@dataclass(frozen=True, init=False)
class Suggestions:
    """Suggestion chips shown under the response."""

    titles: tuple[str, ...] = field(default=())

    def __init__(self, *titles: str | Sequence[str]) -> None:
        flat: list[str] = []
        for title in titles:
            if isinstance(title, str):
                flat.append(title)
            else:
                flat.extend(title)
        object.__setattr__(self, "titles", tuple(flat))

    def to_wire(self) -> list[WirePayload]:
        return [{"title": title} for title in self.titles]


type ResponseItem = SimpleResponse | BasicCard
type Fragment = ResponseItem | Suggestions


def to_fragment(value: object) -> Fragment:
    """Normalize one caller argument into a fragment."""

    if isinstance(value, str):
        return SimpleResponse(value)
    if isinstance(value, (SimpleResponse, BasicCard, Suggestions)):
        return value
    raise UnsupportedFragmentError(value)


def to_prompt(value: object) -> SimpleResponse:
    """Normalize one no-input reprompt; only speech values are accepted."""

    if isinstance(value, str):
        return SimpleResponse(value)
    if isinstance(value, SimpleResponse):
        return value
    raise UnsupportedFragmentError(value)
