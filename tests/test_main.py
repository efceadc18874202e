import logging

import hello_ci.__main__ as entry
from hello_ci.server import app


def test_main_runs_app_on_configured_port(monkeypatch):
    calls = []
    monkeypatch.setattr(entry.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    assert entry.main({"PORT": "4321", "HOST": "127.0.0.1"}) == 0

    assert len(calls) == 1
    args, kwargs = calls[0]
    assert args == (app,)
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 4321


def test_main_uses_default_port(monkeypatch):
    calls = []
    monkeypatch.setattr(entry.uvicorn, "run", lambda *args, **kwargs: calls.append(kwargs))

    assert entry.main({}) == 0
    assert calls[0]["port"] == 3000
    assert calls[0]["host"] == "0.0.0.0"


def test_main_rejects_bad_port(monkeypatch, caplog):
    calls = []
    monkeypatch.setattr(entry.uvicorn, "run", lambda *args, **kwargs: calls.append(kwargs))

    with caplog.at_level(logging.ERROR):
        assert entry.main({"PORT": "not-a-port"}) == 2

    assert calls == []
    assert "PORT" in caplog.text
