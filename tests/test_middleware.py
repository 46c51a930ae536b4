"""
Tests for request id tagging, client address resolution and unhandled errors.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from app.main import create_app


def access_lines(caplog):
    return [r.getMessage() for r in caplog.records if r.name == "app.core.middleware"]


@pytest.mark.parametrize("headers,expected", [
    ({}, "testclient"),
    ({"X-Forwarded-For": "1.2.3.4, 5.6.7.8"}, "1.2.3.4"),
    ({"X-Real-IP": "9.9.9.9", "X-Forwarded-For": "1.2.3.4"}, "9.9.9.9"),
    ({"True-Client-IP": "7.7.7.7", "X-Real-IP": "9.9.9.9"}, "7.7.7.7"),
])
def test_access_line_client_address(client, caplog, headers, expected):
    caplog.set_level(logging.INFO, logger="app.core.middleware")

    response = client.get("/students", headers=headers)

    assert response.status_code == 200
    lines = access_lines(caplog)
    assert len(lines) == 1
    assert f"GET /students from {expected} - 200" in lines[0]
    assert lines[0].startswith(f"[{response.headers['X-Request-ID']}]")


def test_unhandled_exception_keeps_request_id(client, caplog, monkeypatch):
    caplog.set_level(logging.INFO, logger="app.core.middleware")

    def broken():
        raise RuntimeError("boom")

    monkeypatch.setattr(client.app.state.datastore, "find_all", broken)

    response = client.get("/students", headers={"X-Request-ID": "req-500"})

    assert response.status_code == 500
    assert response.text == "internal server error"
    assert response.headers["X-Request-ID"] == "req-500"
    assert "GET /students from testclient - 500" in access_lines(caplog)[0]


def test_debug_mode_keeps_plain_text_errors(settings, monkeypatch):
    debug = settings.model_copy(update={"DEBUG": True})

    with TestClient(create_app(debug)) as client:
        def broken():
            raise RuntimeError("boom")

        monkeypatch.setattr(client.app.state.datastore, "find_all", broken)

        response = client.get("/students")

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "internal server error"
