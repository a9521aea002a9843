from __future__ import annotations

from typing import Any

import pytest

import pairline.__main__ as entrypoint
from pairline.state.settings import AppSettings, ServerSettings
from pairline.runtime.settings import load_settings


def test_main_serves_on_configured_address(monkeypatch: pytest.MonkeyPatch) -> None:
    base = load_settings()
    settings = AppSettings(
        server=ServerSettings(host="127.0.0.1", port=4123),
        limits=base.limits,
        websocket=base.websocket,
        matchmaking=base.matchmaking,
    )
    calls: list[tuple[str, dict[str, Any]]] = []
    monkeypatch.setattr(entrypoint, "load_settings", lambda: settings)
    monkeypatch.setattr(entrypoint.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    entrypoint.main()

    assert len(calls) == 1
    app, kwargs = calls[0]
    assert app == "pairline.server:app"
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 4123
