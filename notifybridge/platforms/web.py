from __future__ import annotations

from notifybridge.platforms.base import PlatformRenderer


class WebRenderer(PlatformRenderer):
    name = "web"

    def format(self, title: str, content: str, media_url: str = "") -> list[str]:
        # media_url is accepted but the HTML block has no slot for it.
        return [
            "[Web - HTML] <div class='notification'>",
            f"  <h3>{title}</h3>",
            f"  <p>{content}</p>",
            "</div>",
        ]
