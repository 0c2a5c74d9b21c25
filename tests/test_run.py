"""
Tests for the uvicorn entry point.
"""

import logging
from unittest import mock

import run


def test_main_serves_app_on_configured_address(monkeypatch, caplog):
    monkeypatch.setattr(run.settings, "host", "127.0.0.1")
    monkeypatch.setattr(run.settings, "port", 9999)
    monkeypatch.setattr(run.settings, "log_level", "WARNING")

    with mock.patch.object(run.uvicorn, "run") as uvicorn_run, caplog.at_level(logging.INFO, logger="user_service_api.run"):
        run.main()

    uvicorn_run.assert_called_once_with(
        run.app, host="127.0.0.1", port=9999, log_level="warning", access_log=False
    )
    assert "Starting server on 127.0.0.1:9999" in caplog.text
    assert "curl http://127.0.0.1:9999/users" in caplog.text
