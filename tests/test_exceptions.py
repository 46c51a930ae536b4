"""
Tests for the error hierarchy and its plain-text rendering.
"""

import pytest

from app.core.exceptions import (
    BadRequestException,
    BaseAPIException,
    DataNotFoundError,
    InternalServerError,
    NotFoundException,
    StorageError,
)


@pytest.mark.parametrize("exc,status_code,message", [
    (BadRequestException("EOF"), 400, "EOF"),
    (NotFoundException("gone"), 404, "gone"),
    (DataNotFoundError(), 404, "data not found"),
    (InternalServerError(), 500, "internal server error"),
    (StorageError("UNIQUE constraint failed: students.nim"), 500,
     "UNIQUE constraint failed: students.nim"),
])
def test_status_and_message(exc, status_code, message):
    assert isinstance(exc, BaseAPIException)
    assert exc.status_code == status_code
    assert exc.message == message == str(exc)
    assert vars(exc) == {"message": message, "status_code": status_code}


def test_error_body_is_only_the_message(client):
    response = client.get("/students/missing")

    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "data not found"
