"""Tests for main module."""

import pytest

from image_deck import main as main_module


def test_main_runs_uvicorn_with_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[str, dict[str, object]]] = []
    monkeypatch.setenv("PORT", "4100")
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr(
        main_module.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs))
    )

    main_module.main()

    assert calls == [
        (
            "image_deck.api.asgi:app",
            {"host": "0.0.0.0", "port": 4100, "log_level": "info"},
        )
    ]
