from __future__ import annotations

import io
import logging

from notifybridge.demo import BANNER, DEFAULT_SCENARIOS, build_renderers, run_demo, send_all
from notifybridge.notifications import TextNotification


def test_default_demo_output() -> None:
    out = io.StringIO()
    sent = run_demo(out=out)
    text = out.getvalue()

    assert sent == len(DEFAULT_SCENARIOS) == 4
    assert text.startswith(BANNER + "\n\n")
    assert text.count("[Web - HTML]") == 2
    assert text.count("[Mobile - Native]") == 2
    assert text.count("Icon: notification_icon.png") == 2
    assert "tutorial.mp4" not in text
    assert "promo.jpg" not in text
    assert "3 tipos × 3 plataformas = 9 combinações" in text
    assert "Apenas 6 classes concretas (3 + 3)" in text


def test_demo_scenario_order() -> None:
    out = io.StringIO()
    run_demo({"show_summary": False}, out=out)
    text = out.getvalue()
    first = text.index("<h3>Novo Pedido</h3>")
    second = text.index("Title: Novo Pedido")
    third = text.index("<h3>Promoção</h3>")
    fourth = text.index("Title: Tutorial")
    assert first < second < third < fourth
    assert "=== BRIDGE ===" not in text


def test_demo_with_custom_scenarios() -> None:
    out = io.StringIO()
    config = {
        "desktop_width": 10,
        "show_summary": False,
        "scenarios": [
            {"platform": "desktop", "type": "image", "title": "Foto nova", "content": "x", "media_url": "a.png"},
        ],
    }
    assert run_demo(config, out=out) == 1
    assert "║ Foto nova  ║" in out.getvalue()


def test_build_renderers_shares_one_instance_per_platform() -> None:
    renderers = build_renderers(desktop_width=12)
    assert sorted(renderers) == ["desktop", "mobile", "web"]
    assert renderers["desktop"].width == 12


class _BrokenRenderer:
    def render(self, title: str, content: str, media_url: str = "") -> None:
        raise RuntimeError("boom")


class _ListRenderer:
    def __init__(self) -> None:
        self.titles: list[str] = []

    def render(self, title: str, content: str, media_url: str = "") -> None:
        self.titles.append(title)


def test_send_all_keeps_going_after_failure(caplog) -> None:
    good = _ListRenderer()
    notifications = [
        TextNotification(good, "first", ""),
        TextNotification(_BrokenRenderer(), "broken", ""),
        TextNotification(good, "last", ""),
    ]
    with caplog.at_level(logging.ERROR, logger="notifybridge.demo"):
        sent = send_all(notifications, out=io.StringIO())
    assert sent == 2
    assert good.titles == ["first", "last"]
    assert "Send failed" in caplog.text
