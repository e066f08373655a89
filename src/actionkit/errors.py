"""Application-level exception types for actionkit."""

from __future__ import annotations


class ActionKitError(Exception):
    """Base exception for actionkit."""


class ConfigurationError(ActionKitError):
    """Raised when settings from the environment are invalid."""


class InvalidRequestError(ActionKitError):
    """Raised when an inbound request mapping does not match the platform schema."""


class StorageDecodeError(ActionKitError):
    """Raised when persisted user storage or a conversation token is malformed."""

    def __init__(self, field: str, reason: str) -> None:
        """Initialize with the offending field name."""
        super().__init__(f"Malformed {field}: {reason}")
        self.field = field
        self.reason = reason


class FragmentError(ActionKitError):
    """Base exception for response fragment errors."""


class UnsupportedFragmentError(FragmentError):
    """Raised when a value outside the fragment vocabulary is passed to a response call."""

    def __init__(self, value: object) -> None:
        """Initialize with the rejected value."""
        super().__init__(f"Unsupported response fragment of type {type(value).__name__}: {value!r}")
        self.value = value


class EmptyResponseError(FragmentError):
    """Raised when asking the user without any fragment."""


class NoInputPromptLimitError(FragmentError):
    """Raised when more no-input prompts are set than the platform accepts."""

    def __init__(self, count: int, limit: int) -> None:
        """Initialize with the prompt count and the configured limit."""
        super().__init__(f"{count} no-input prompts given, at most {limit} allowed")
        self.count = count
        self.limit = limit


class ResponseModeError(ActionKitError):
    """Raised when one turn both asks and closes the conversation."""
