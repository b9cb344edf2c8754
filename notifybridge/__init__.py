"""Notification types bridged to platform renderers."""

from notifybridge.notifications import (
    NOTIFICATION_TYPES,
    ImageNotification,
    MissingRendererError,
    Notification,
    TextNotification,
    UnknownNotificationTypeError,
    VideoNotification,
    build_notification,
)
from notifybridge.platforms import (
    PLATFORMS,
    DesktopRenderer,
    MobileRenderer,
    PlatformRenderer,
    UnknownPlatformError,
    WebRenderer,
    build_renderer,
)

__all__ = [
    "NOTIFICATION_TYPES",
    "PLATFORMS",
    "DesktopRenderer",
    "ImageNotification",
    "MissingRendererError",
    "MobileRenderer",
    "Notification",
    "PlatformRenderer",
    "TextNotification",
    "UnknownNotificationTypeError",
    "UnknownPlatformError",
    "VideoNotification",
    "WebRenderer",
    "build_notification",
    "build_renderer",
]
