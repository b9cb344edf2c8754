from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, TextIO

from notifybridge.notifications import NOTIFICATION_TYPES, Notification, build_notification
from notifybridge.platforms import PLATFORMS, PlatformRenderer, build_renderer
from notifybridge.platforms.desktop import DEFAULT_WIDTH


log = logging.getLogger("notifybridge.demo")

BANNER = "=== Sistema de Notificações Multi-Plataforma ==="

DEFAULT_SCENARIOS: list[dict[str, Any]] = [
    {"platform": "web", "type": "text", "title": "Novo Pedido", "content": "Você tem um novo pedido", "media_url": None},
    {"platform": "mobile", "type": "text", "title": "Novo Pedido", "content": "Você tem um novo pedido", "media_url": None},
    {"platform": "web", "type": "image", "title": "Promoção", "content": "50% de desconto!", "media_url": "promo.jpg"},
    {
        "platform": "mobile",
        "type": "video",
        "title": "Tutorial",
        "content": "Aprenda a usar o app",
        "media_url": "tutorial.mp4",
    },
]


def build_renderers(out: Optional[TextIO] = None, desktop_width: int = DEFAULT_WIDTH) -> dict[str, PlatformRenderer]:
    out_map: dict[str, PlatformRenderer] = {}
    for name in PLATFORMS:
        options: dict[str, Any] = {"width": desktop_width} if name == "desktop" else {}
        out_map[name] = build_renderer(name, out=out, **options)
    return out_map


def summary_lines() -> list[str]:
    types = len(NOTIFICATION_TYPES)
    platforms = len(PLATFORMS)
    return [
        "=== BRIDGE ===",
        f"✓ {types} tipos × {platforms} plataformas = {types * platforms} combinações",
        f"✓ Apenas {types + platforms} classes concretas ({types} + {platforms})",
        "✓ Adicionar novo tipo = criar 1 classe (funciona em todas as plataformas)",
        "✓ Adicionar nova plataforma = criar 1 classe (funciona com todos os tipos)",
        "✓ Tipo de notificação e plataforma variam de forma independente",
    ]


def send_all(notifications: Iterable[Notification], *, out: Optional[TextIO] = None) -> int:
    """Send each notification in order, separated by a blank line.

    Returns how many were sent. A failing renderer is logged and skipped.
    """
    sent = 0
    for n in notifications:
        try:
            n.send()
            sent += 1
        except Exception:
            log.exception("Send failed: %s via %r", n.kind, n.renderer)
        print(file=out)
    return sent


def build_scenarios(
    scenarios: Iterable[Mapping[str, Any]], renderers: Mapping[str, PlatformRenderer]
) -> list[Notification]:
    return [
        build_notification(
            str(s["type"]),
            renderers[str(s["platform"])],
            str(s["title"]),
            str(s["content"]),
            s.get("media_url"),
        )
        for s in scenarios
    ]


def run_demo(config: Optional[Mapping[str, Any]] = None, *, out: Optional[TextIO] = None) -> int:
    config = config or {}

    renderers = build_renderers(out, desktop_width=int(config.get("desktop_width", DEFAULT_WIDTH)))
    scenarios = config.get("scenarios")
    if scenarios is None:
        scenarios = DEFAULT_SCENARIOS
    notifications = build_scenarios(scenarios, renderers)
    log.info("Running %d scenario(s) on %d platform(s)", len(notifications), len(renderers))

    print(BANNER + "\n", file=out)
    sent = send_all(notifications, out=out)

    if config.get("show_summary", True):
        for line in summary_lines():
            print(line, file=out)
        print(file=out)
    return sent
