from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from notifybridge.notifications import NOTIFICATION_TYPES, TextNotification
from notifybridge.platforms import PLATFORMS
from notifybridge.platforms.desktop import DEFAULT_WIDTH


class ConfigError(RuntimeError):
    pass


def default_config() -> dict[str, Any]:
    return {"desktop_width": DEFAULT_WIDTH, "show_summary": True, "scenarios": None}


def _normalize_scenario(i: int, s: Any) -> dict[str, Any]:
    if not isinstance(s, dict):
        raise ConfigError(f"scenarios[{i}] must be a mapping.")

    platform = str(s.get("platform") or "").lower()
    if platform not in PLATFORMS:
        raise ConfigError(f"scenarios[{i}].platform must be one of: {', '.join(PLATFORMS)}.")

    kind = str(s.get("type") or "").lower()
    if kind not in NOTIFICATION_TYPES:
        raise ConfigError(f"scenarios[{i}].type must be one of: {', '.join(NOTIFICATION_TYPES)}.")

    for key in ("title", "content"):
        if key not in s:
            raise ConfigError(f"scenarios[{i}] requires {key}.")
        if s[key] is not None and not isinstance(s[key], (str, int, float)):
            raise ConfigError(f"scenarios[{i}].{key} must be a string.")

    media_url = s.get("media_url")
    media_url = str(media_url).strip() if media_url else None
    if NOTIFICATION_TYPES[kind] is not TextNotification and not media_url:
        raise ConfigError(f"scenarios[{i}] of type '{kind}' requires media_url.")

    return {
        "platform": platform,
        "type": kind,
        # YAML turns an empty value into None; render it as an empty string.
        "title": "" if s["title"] is None else str(s["title"]),
        "content": "" if s["content"] is None else str(s["content"]),
        "media_url": media_url,
    }


def load_config(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping (YAML dict).")

    cfg = default_config()

    width = raw.get("desktop_width", DEFAULT_WIDTH)
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        raise ConfigError("desktop_width must be a positive integer.")
    cfg["desktop_width"] = width
    cfg["show_summary"] = bool(raw.get("show_summary", True))

    if "scenarios" in raw:
        scenarios = raw.get("scenarios") or []
        if not isinstance(scenarios, list):
            raise ConfigError("scenarios must be a list.")
        cfg["scenarios"] = [_normalize_scenario(i, s) for i, s in enumerate(scenarios)]

    return cfg
