"""Codec and differ for the ``{"data": ...}`` storage envelope."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from actionkit.errors import StorageDecodeError
from actionkit.types import JsonObject, Storage

ENVELOPE_KEY = "data"
UNCHANGED = ""


def wrap(storage: Mapping[str, Any]) -> JsonObject:
    """Place a storage mapping inside the envelope."""

    return {ENVELOPE_KEY: storage}


def unwrap(envelope: Any, *, field: str = "userStorage") -> Storage:
    """Extract the storage mapping from a decoded envelope."""

    if not isinstance(envelope, Mapping):
        raise StorageDecodeError(field, f"expected an object envelope, got {type(envelope).__name__}")
    data = envelope.get(ENVELOPE_KEY)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise StorageDecodeError(field, f"expected an object under {ENVELOPE_KEY!r}, got {type(data).__name__}")
    return dict(data)


def serialize(storage: Mapping[str, Any]) -> str:
    """Serialize a storage mapping to its canonical enveloped JSON form."""

    return json.dumps(wrap(storage), ensure_ascii=False, separators=(",", ":"))


def deserialize(raw: str | None, *, field: str = "userStorage") -> Storage:
    """Decode an enveloped JSON string; empty input yields an empty mapping."""

    if not raw:
        return {}
    try:
        envelope = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StorageDecodeError(field, str(exc)) from exc
    return unwrap(envelope, field=field)


def _canonical(storage: Mapping[str, Any]) -> str:
    return json.dumps(storage, ensure_ascii=False, sort_keys=True, separators=(",", ":"))


def diff(original: Mapping[str, Any], current: Mapping[str, Any]) -> str:
    """Return the serialized storage when it changed, otherwise the empty sentinel.

    Both sides are compared by their sorted-key JSON encoding: ``1`` and
    ``True`` differ there, while key order alone is not a change.
    """

    if _canonical(current) == _canonical(original):
        return UNCHANGED
    return serialize(current)
