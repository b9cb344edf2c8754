from __future__ import annotations

import sys
from typing import Optional, TextIO


class UnknownPlatformError(LookupError):
    pass


class PlatformRenderer:
    """Formats a notification for one platform and writes it to a text sink.

    ``render`` never fails: any strings are accepted as-is, including empty
    ones. Subclasses only implement ``format``.
    """

    name: str

    def __init__(self, *, out: Optional[TextIO] = None) -> None:
        self._out = out

    @property
    def out(self) -> TextIO:
        # Resolved per call so a redirected sys.stdout is honoured.
        return self._out if self._out is not None else sys.stdout

    def format(self, title: str, content: str, media_url: str = "") -> list[str]:  # pragma: no cover
        raise NotImplementedError

    def render(self, title: str, content: str, media_url: str = "") -> None:
        out = self.out
        for line in self.format(title, content, media_url):
            print(line, file=out)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
