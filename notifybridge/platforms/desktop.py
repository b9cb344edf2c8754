from __future__ import annotations

from typing import Optional, TextIO

from notifybridge.platforms.base import PlatformRenderer

DEFAULT_WIDTH = 24
ELLIPSIS = "…"


def fit(text: str, width: int) -> str:
    """Right-pad ``text`` to ``width``; longer text is cut and ends with an ellipsis."""
    if len(text) > width:
        return text[: width - 1] + ELLIPSIS
    return text.ljust(width)


class DesktopRenderer(PlatformRenderer):
    name = "desktop"

    def __init__(self, *, out: Optional[TextIO] = None, width: int = DEFAULT_WIDTH) -> None:
        super().__init__(out=out)
        if isinstance(width, bool) or not isinstance(width, int) or width < 1:
            raise ValueError(f"Desktop width must be a positive integer, got {width!r}")
        self.width = width

    def format(self, title: str, content: str, media_url: str = "") -> list[str]:
        border = "═" * (self.width + 2)
        return [
            "[Desktop - Toast] Windows Notification:",
            f"╔{border}╗",
            f"║ {fit(title, self.width)} ║",
            f"║ {fit(content, self.width)} ║",
            f"╚{border}╝",
        ]

    def __repr__(self) -> str:
        return f"DesktopRenderer(width={self.width})"
