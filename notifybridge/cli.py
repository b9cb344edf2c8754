from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from notifybridge.config import ConfigError, default_config, load_config
from notifybridge.demo import run_demo
from notifybridge.notifications import NOTIFICATION_TYPES, UnknownNotificationTypeError, build_notification
from notifybridge.platforms import PLATFORMS, UnknownPlatformError, build_renderer
from notifybridge.platforms.desktop import DEFAULT_WIDTH


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="notifybridge")
    parser.add_argument("--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Send the sample notifications")
    demo.add_argument("--config", type=Path, default=None, help="YAML scenario file (default: $NOTIFYBRIDGE_CONFIG)")
    demo.add_argument("--no-summary", action="store_true")

    send = sub.add_parser("send", help="Send a single notification")
    send.add_argument("--platform", required=True, choices=list(PLATFORMS))
    send.add_argument("--type", dest="kind", default="text", choices=list(NOTIFICATION_TYPES))
    send.add_argument("--title", required=True)
    send.add_argument("--content", default="")
    send.add_argument("--media-url", default=None)
    send.add_argument("--desktop-width", type=int, default=DEFAULT_WIDTH)

    sub.add_parser("platforms", help="List platforms and notification types")

    return parser


def _config_path(args: argparse.Namespace) -> Path | None:
    if args.config is not None:
        return args.config
    raw = os.getenv("NOTIFYBRIDGE_CONFIG", "").strip()
    return Path(raw) if raw else None


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    load_dotenv()

    if args.command == "demo":
        config_path = _config_path(args)
        try:
            config = load_config(config_path) if config_path is not None else default_config()
        except ConfigError as e:
            logging.error("%s", e)
            return 1
        if args.no_summary:
            config["show_summary"] = False
        run_demo(config)
        return 0

    if args.command == "send":
        options = {"width": args.desktop_width} if args.platform == "desktop" else {}
        try:
            renderer = build_renderer(args.platform, **options)
            notification = build_notification(args.kind, renderer, args.title, args.content, args.media_url)
        except (UnknownPlatformError, UnknownNotificationTypeError, ValueError) as e:
            logging.error("%s", e)
            return 1
        notification.send()
        return 0

    if args.command == "platforms":
        print("platforms: " + ", ".join(PLATFORMS))
        print("types: " + ", ".join(NOTIFICATION_TYPES))
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2
