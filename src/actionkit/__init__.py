"""actionkit - turn state for conversational actions."""

from .conversation import Conversation, User
from .fragments import BasicCard, Button, Image, ImageDisplay, SimpleResponse, Suggestions
from .surface import Capability

__version__ = "0.1.0"

__all__ = [
    "BasicCard",
    "Button",
    "Capability",
    "Conversation",
    "Image",
    "ImageDisplay",
    "SimpleResponse",
    "Suggestions",
    "User",
]
