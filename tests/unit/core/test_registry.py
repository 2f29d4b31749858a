from __future__ import annotations

"""
Unit tests for the process-wide registry.
"""

import logging
from typing import Dict

import pytest

from catlog.core.registry import GlobalRegistry
from catlog.domain.colors import TargetKind
from catlog.domain.levels import LogLevel


def test_defaults(registry: GlobalRegistry) -> None:
    assert registry.level is LogLevel.DEBUG
    assert registry.logfile is None
    assert registry.target is TargetKind.TERMINAL
    assert registry.effective_threshold() is LogLevel.DEBUG


def test_set_global_level_accepts_names(registry: GlobalRegistry) -> None:
    registry.set_global_level("warn")
    assert registry.level is LogLevel.WARN


def test_set_global_level_rejects_unknown(registry: GlobalRegistry) -> None:
    with pytest.raises(ValueError):
        registry.set_global_level("LOUD")
    assert registry.level is LogLevel.DEBUG


def test_env_override_wins_without_mutating_global(registry: GlobalRegistry, env_vars: Dict[str, str]) -> None:
    registry.set_global_level(LogLevel.DEBUG)
    env_vars["LOG"] = "error"

    assert registry.effective_threshold() is LogLevel.ERROR
    assert registry.level is LogLevel.DEBUG


def test_empty_env_override_is_ignored(registry: GlobalRegistry, env_vars: Dict[str, str]) -> None:
    registry.set_global_level("INFO")
    env_vars["LOG"] = ""
    assert registry.effective_threshold() is LogLevel.INFO


def test_unknown_env_override_is_reported_once(
        registry: GlobalRegistry, env_vars: Dict[str, str], caplog: pytest.LogCaptureFixture
) -> None:
    env_vars["LOG"] = "chatty"
    with caplog.at_level(logging.WARNING, logger="catlog.core.registry"):
        assert registry.effective_threshold() == "chatty"
        registry.effective_threshold()

    warnings = [r for r in caplog.records if "chatty" in r.getMessage()]
    assert len(warnings) == 1


def test_reset_reports_unknown_env_override_again(
        registry: GlobalRegistry, env_vars: Dict[str, str], caplog: pytest.LogCaptureFixture
) -> None:
    env_vars["LOG"] = "chatty"
    with caplog.at_level(logging.WARNING, logger="catlog.core.registry"):
        registry.effective_threshold()
        registry.reset()
        registry.effective_threshold()

    warnings = [r for r in caplog.records if "chatty" in r.getMessage()]
    assert len(warnings) == 2


def test_logfile_and_target(registry: GlobalRegistry) -> None:
    registry.set_global_logfile("/tmp/all.log")
    registry.force_markup_mode(True)
    assert registry.logfile == "/tmp/all.log"
    assert registry.target is TargetKind.DISPLAY_MARKUP

    registry.set_global_logfile(None)
    registry.force_markup_mode(False)
    assert registry.logfile is None
    assert registry.target is TargetKind.TERMINAL


def test_reset_drops_listeners(registry: GlobalRegistry) -> None:
    registry.events.on("data", print)
    registry.set_global_level("ERROR")
    registry.reset()
    assert registry.level is LogLevel.DEBUG
    assert registry.events.listener_count("data") == 0
