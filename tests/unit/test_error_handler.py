"""
Unit tests for error handler middleware
"""
import json

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.contacts.errors import ContactNotFoundError, ContactValidationError
from src.middleware.error_handler import (
    contact_error_handler,
    error_handler,
    validation_error_handler,
)


def _request():
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/test",
            "headers": [],
            "query_string": b"",
            "server": ("testserver", 80),
            "scheme": "http",
        }
    )


class TestErrorHandler:
    def test_not_found_error(self):
        response = contact_error_handler(_request(), ContactNotFoundError(7))
        assert isinstance(response, JSONResponse)
        assert response.status_code == 404
        assert json.loads(response.body) == {"message": "Contact not found"}

    def test_validation_error(self):
        response = contact_error_handler(_request(), ContactValidationError())
        assert response.status_code == 400
        assert json.loads(response.body) == {"message": "Name, phone, and email are required"}

    def test_request_validation_error(self):
        exc = RequestValidationError(
            [{"loc": ("body", "name"), "msg": "Input should be a valid string", "type": "string_type"}]
        )
        response = validation_error_handler(_request(), exc)
        assert response.status_code == 400
        body = json.loads(response.body)
        assert body["message"] == "Invalid request body"
        assert body["errors"] == [{"field": "name", "message": "Input should be a valid string"}]

    def test_unexpected_error_hides_details(self):
        response = error_handler(_request(), ValueError("secret detail"))
        assert response.status_code == 500
        body = response.body.decode()
        assert "secret detail" not in body
        assert json.loads(body) == {"message": "Internal server error"}
