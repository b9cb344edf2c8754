from __future__ import annotations

from typing import Any, Optional, TextIO

from notifybridge.platforms.base import PlatformRenderer, UnknownPlatformError
from notifybridge.platforms.desktop import DesktopRenderer
from notifybridge.platforms.mobile import MobileRenderer
from notifybridge.platforms.web import WebRenderer

PLATFORMS: dict[str, type[PlatformRenderer]] = {
    cls.name: cls for cls in (WebRenderer, MobileRenderer, DesktopRenderer)
}


def build_renderer(name: str, *, out: Optional[TextIO] = None, **options: Any) -> PlatformRenderer:
    cls = PLATFORMS.get(str(name).lower())
    if cls is None:
        raise UnknownPlatformError(f"Unknown platform: {name} (expected one of: {', '.join(PLATFORMS)})")
    return cls(out=out, **options)


__all__ = [
    "PLATFORMS",
    "DesktopRenderer",
    "MobileRenderer",
    "PlatformRenderer",
    "UnknownPlatformError",
    "WebRenderer",
    "build_renderer",
]
