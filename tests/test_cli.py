from __future__ import annotations

from pathlib import Path

from notifybridge.cli import main


def test_demo_command(capsys, monkeypatch) -> None:
    monkeypatch.delenv("NOTIFYBRIDGE_CONFIG", raising=False)
    assert main(["demo"]) == 0
    out = capsys.readouterr().out
    assert "=== Sistema de Notificações Multi-Plataforma ===" in out
    assert "=== BRIDGE ===" in out


def test_demo_command_reads_config_from_env(capsys, monkeypatch, tmp_path: Path) -> None:
    path = tmp_path / "demo.yaml"
    path.write_text(
        "scenarios:\n  - platform: desktop\n    type: text\n    title: Olá\n    content: Mundo\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("NOTIFYBRIDGE_CONFIG", str(path))
    assert main(["demo", "--no-summary"]) == 0
    out = capsys.readouterr().out
    assert "[Desktop - Toast] Windows Notification:" in out
    assert "[Web - HTML]" not in out
    assert "=== BRIDGE ===" not in out


def test_demo_command_bad_config(tmp_path: Path) -> None:
    assert main(["demo", "--config", str(tmp_path / "missing.yaml")]) == 1


def test_send_command(capsys) -> None:
    code = main(
        ["send", "--platform", "mobile", "--type", "video", "--title", "Tutorial", "--media-url", "tutorial.mp4"]
    )
    assert code == 0
    out = capsys.readouterr().out
    assert "Title: Tutorial" in out
    assert "Icon: notification_icon.png" in out


def test_send_command_requires_media_for_image() -> None:
    assert main(["send", "--platform", "web", "--type", "image", "--title", "x"]) == 1


def test_send_command_rejects_bad_width() -> None:
    assert main(["send", "--platform", "desktop", "--title", "x", "--desktop-width", "0"]) == 1


def test_platforms_command(capsys) -> None:
    assert main(["platforms"]) == 0
    out = capsys.readouterr().out
    assert "platforms: web, mobile, desktop" in out
    assert "types: text, image, video" in out
