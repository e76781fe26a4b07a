from __future__ import annotations

import runpy


def test_main_module_invokes_server(monkeypatch):
    executed = {}

    def fake_main() -> None:
        executed["called"] = True

    monkeypatch.setattr("src.main.server.main", fake_main)

    runpy.run_module("src.main.__main__", run_name="__main__")

    assert executed["called"] is True


def test_server_main_runs_uvicorn(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs) -> None:
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr("src.main.server.uvicorn.run", fake_run)
    monkeypatch.setenv("GE_PORT", "9000")

    from src.main.server import main

    main()

    assert calls["app"] == "src.main.app:app"
    assert calls["port"] == 9000
    assert calls["log_config"] is None
