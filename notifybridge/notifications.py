"""Notification types: the abstraction side of the bridge.

A notification knows which of its fields matter and hands them to whatever
renderer it was built with. It never formats anything itself, so every type
works on every platform.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Protocol


log = logging.getLogger("notifybridge.notifications")


class MissingRendererError(ValueError):
    pass


class UnknownNotificationTypeError(LookupError):
    pass


class Renderer(Protocol):
    def render(self, title: str, content: str, media_url: str = "") -> None: ...


@dataclass(frozen=True)
class Notification:
    renderer: Renderer
    title: str
    content: str

    kind: ClassVar[str]

    def __post_init__(self) -> None:
        if self.renderer is None or not callable(getattr(self.renderer, "render", None)):
            raise MissingRendererError(
                f"{self.__class__.__name__} requires a renderer with a render() method, got {self.renderer!r}"
            )

    @property
    def media_url(self) -> Optional[str]:
        return None

    def send(self) -> None:  # pragma: no cover
        raise NotImplementedError


@dataclass(frozen=True)
class TextNotification(Notification):
    kind: ClassVar[str] = "text"

    def send(self) -> None:
        log.debug("Sending text notification via %r: %s", self.renderer, self.title)
        self.renderer.render(self.title, self.content, "")


@dataclass(frozen=True)
class ImageNotification(Notification):
    image_url: str

    kind: ClassVar[str] = "image"

    @property
    def media_url(self) -> Optional[str]:
        return self.image_url

    def send(self) -> None:
        log.debug("Sending image notification via %r: %s", self.renderer, self.title)
        self.renderer.render(self.title, self.content, self.image_url)


@dataclass(frozen=True)
class VideoNotification(Notification):
    video_url: str

    kind: ClassVar[str] = "video"

    @property
    def media_url(self) -> Optional[str]:
        return self.video_url

    def send(self) -> None:
        log.debug("Sending video notification via %r: %s", self.renderer, self.title)
        self.renderer.render(self.title, self.content, self.video_url)


NOTIFICATION_TYPES: dict[str, type[Notification]] = {
    cls.kind: cls for cls in (TextNotification, ImageNotification, VideoNotification)
}


def build_notification(
    kind: str,
    renderer: Any,
    title: str,
    content: str,
    media_url: Optional[str] = None,
) -> Notification:
    key = str(kind).lower()
    cls = NOTIFICATION_TYPES.get(key)
    if cls is None:
        raise UnknownNotificationTypeError(
            f"Unknown notification type: {kind} (expected one of: {', '.join(NOTIFICATION_TYPES)})"
        )
    if cls is TextNotification:
        if media_url:
            log.warning("Text notifications carry no media; ignoring media_url=%s", media_url)
        return TextNotification(renderer, title, content)
    if not media_url:
        raise ValueError(f"{key} notifications require a media_url")
    return cls(renderer, title, content, media_url)  # type: ignore[call-arg]
