#!/usr/bin/env python3
"""
Test the command line entry points.
"""

import asyncio
import locale

from rich.console import Console

from modelavail import main as cli
from modelavail.config import GatewaySettings


def test_reset_with_empty_model_id_reports_reset_error():
    console = Console(record=True, width=120, color_system=None)
    # Nothing listens here; an empty id must fail before any request is made.
    settings = GatewaySettings(base_url="http://127.0.0.1:9")

    code = asyncio.run(cli.run_reset(settings, console, "", "x"))

    assert code == 1
    assert "Failed to reset model availability" in console.export_text()


def test_main_applies_system_time_locale(monkeypatch):
    calls = []
    monkeypatch.setattr(cli.locale, "setlocale", lambda *args: calls.append(args))

    async def fake_list(settings, console):
        return 0

    monkeypatch.setattr(cli, "run_list", fake_list)
    monkeypatch.setattr(cli, "load_settings", lambda: GatewaySettings())

    assert cli.main(["list"]) == 0
    assert calls == [(locale.LC_TIME, "")]


def test_unsupported_locale_is_only_a_warning(monkeypatch, caplog):
    def unsupported(*args):
        raise locale.Error("unsupported locale setting")

    monkeypatch.setattr(cli.locale, "setlocale", unsupported)

    with caplog.at_level("WARNING", logger="modelavail.main"):
        cli.configure_locale()

    assert "unsupported locale setting" in caplog.text
