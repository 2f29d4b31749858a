from __future__ import annotations

"""
Smoke tests for the public package API and the process-wide registry.
"""

from pathlib import Path
from typing import List, Tuple

import pytest

import catlog


def test_public_api_contract() -> None:
    required = [
        "create",
        "set_log_level",
        "set_logfile",
        "force_markup_mode",
        "events",
        "Colors",
        "LogLevels",
        "Color",
        "LogLevel",
        "TargetKind",
        "SinkUnavailable",
        "configure_diagnostics",
    ]
    for name in required:
        assert hasattr(catlog, name), f"catlog missing: {name}"


def test_module_level_configuration(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    received: List[Tuple[str, str, str]] = []
    catlog.events.on("data", lambda *args: received.append(args))

    log_file = tmp_path / "global.log"
    catlog.set_logfile(str(log_file))
    catlog.set_log_level(catlog.LogLevels["WARN"])

    log = catlog.create("daemon", {"useColors": False, "showTimestamp": False})
    log.info("dropped")
    log.warn("disk at %d%%", 91)
    log.close()

    assert received == [("daemon", "WARN", "disk at 91%")]
    assert log_file.read_text(encoding="utf-8") == "[WARN]  daemon: disk at 91%\n"
    assert capsys.readouterr().out == "[WARN]  daemon: disk at 91%\n"


def test_environment_override(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("LOG", "error")
    log = catlog.create("svc", use_colors=False, show_timestamp=False)

    log.warn("hidden")
    log.error("shown")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "[ERROR] svc: shown\n"


def test_color_option_from_public_palette(capsys: pytest.CaptureFixture[str]) -> None:
    log = catlog.create("logger3", color=catlog.Colors["Magenta"], show_timestamp=False, show_level=False)
    log.log("hi")
    assert capsys.readouterr().out == "\u001b[35;1mlogger3\u001b[0m: hi\n"


def test_force_markup_mode_strips_markers_on_plain_stream(capsys: pytest.CaptureFixture[str]) -> None:
    catlog.force_markup_mode(True)
    log = catlog.create("ui", show_timestamp=False)
    log.info("ready")
    assert capsys.readouterr().out == "[INFO]  ui: ready\n"


def test_invalid_global_level() -> None:
    with pytest.raises(ValueError):
        catlog.set_log_level("SHOUT")


def test_invalid_option() -> None:
    with pytest.raises(catlog.ConfigurationError):
        catlog.create("svc", {"verbose": True})
