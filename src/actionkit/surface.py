"""Surface capability vocabulary and read-only device views."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum

from loguru import logger


class Capability(StrEnum):
    """Capabilities the platform advertises for a surface."""

    SCREEN_OUTPUT = "actions.capability.SCREEN_OUTPUT"
    AUDIO_OUTPUT = "actions.capability.AUDIO_OUTPUT"
    WEB_BROWSER = "actions.capability.WEB_BROWSER"
    MEDIA_RESPONSE_AUDIO = "actions.capability.MEDIA_RESPONSE_AUDIO"


_KNOWN = {capability.value: capability for capability in Capability}


@dataclass(frozen=True)
class SurfaceCapabilities:
    """Capabilities of one surface, fixed for the lifetime of a turn."""

    capabilities: frozenset[Capability] = frozenset()
    unknown: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> SurfaceCapabilities:
        known: set[Capability] = set()
        unknown: set[str] = set()
        for name in names:
            capability = _KNOWN.get(name)
            if capability is None:
                unknown.add(name)
            else:
                known.add(capability)
        if unknown:
            logger.debug("surface.capabilities unknown={}", sorted(unknown))
        return cls(frozenset(known), frozenset(unknown))

    def has(self, capability: Capability | str) -> bool:
        if isinstance(capability, Capability):
            return capability in self.capabilities
        known = _KNOWN.get(capability)
        if known is None:
            return capability in self.unknown
        return known in self.capabilities

    @property
    def screen(self) -> bool:
        return Capability.SCREEN_OUTPUT in self.capabilities

    @property
    def audio(self) -> bool:
        return Capability.AUDIO_OUTPUT in self.capabilities

    @property
    def web_browser(self) -> bool:
        return Capability.WEB_BROWSER in self.capabilities

    @property
    def media_response_audio(self) -> bool:
        return Capability.MEDIA_RESPONSE_AUDIO in self.capabilities


@dataclass(frozen=True)
class AvailableSurfaces:
    """Other surfaces the user owns, e.g. a phone next to a speaker."""

    surfaces: tuple[SurfaceCapabilities, ...] = ()

    def has(self, capability: Capability | str) -> bool:
        """Check whether any available surface has the capability."""
        return any(surface.has(capability) for surface in self.surfaces)

    def __len__(self) -> int:
        return len(self.surfaces)
