from __future__ import annotations

from notifybridge.platforms.base import PlatformRenderer

ICON = "notification_icon.png"


class MobileRenderer(PlatformRenderer):
    name = "mobile"

    def format(self, title: str, content: str, media_url: str = "") -> list[str]:
        return [
            "[Mobile - Native] Push Notification:",
            f"Title: {title}",
            f"Body: {content}",
            f"Icon: {ICON}",
        ]
