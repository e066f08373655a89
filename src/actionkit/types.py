"""Framework-neutral data aliases."""

from __future__ import annotations

from typing import Any

type JsonObject = dict[str, Any]
type Storage = dict[str, Any]
type WirePayload = dict[str, Any]
