"""Unit tests for the problem-details error mapping."""

import json
from http import HTTPStatus

import pytest
from starlette.requests import Request

from accounts.application import error as app_error
from accounts.domain import error
from accounts.interface.api.problem import (
    handle_domain_error,
    handle_unexpected_error,
    sanitize,
    status_for,
)


def _request(path: str = "/users") -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": path,
            "headers": [],
            "query_string": b"",
        }
    )


class TestStatusMapping:
    @pytest.mark.parametrize(
        "exc, status",
        [
            (error.empty_field("name"), HTTPStatus.BAD_REQUEST),
            (app_error.matching_error("User", "password", "x"), HTTPStatus.BAD_REQUEST),
            (app_error.entity_not_found("User", "id", "1", "x"), HTTPStatus.NOT_FOUND),
            (error.invalid_state("User", "Active", "activate"), HTTPStatus.CONFLICT),
            (app_error.duplicate_email("a@b.com"), HTTPStatus.CONFLICT),
        ],
    )
    def test_status_for(self, exc, status):
        assert status_for(exc) == status


class TestSanitize:
    def test_forbidden_keys_removed(self):
        clean = sanitize(
            {"id": 1, "password": "x", "token": "t", "email": "e", "field": "name"}
        )

        assert clean == {"field": "name"}

    def test_email_identifier_removed(self):
        clean = sanitize({"identifier_type": "email", "identifier": "a@b.com"})

        assert "identifier" not in clean

    def test_id_identifier_kept(self):
        clean = sanitize({"identifier_type": "id", "identifier": "42"})

        assert clean["identifier"] == "42"

    def test_input_not_modified(self):
        details = {"email": "a@b.com"}

        sanitize(details)

        assert details == {"email": "a@b.com"}


class TestHandlers:
    @pytest.mark.asyncio
    async def test_domain_error_body(self):
        response = await handle_domain_error(
            _request("/users/search"),
            app_error.entity_not_found("User", "email", "a@b.com", "find_by_email"),
        )
        body = json.loads(response.body)

        assert response.status_code == 404
        assert body["title"] == "Not Found"
        assert body["status"] == 404
        assert body["instance"] == "/users/search"
        assert body["operation"] == "find_by_email"
        assert "identifier" not in body
        assert "fields" not in body

    @pytest.mark.asyncio
    async def test_validation_error_includes_field(self):
        response = await handle_domain_error(_request(), error.empty_field("name"))
        body = json.loads(response.body)

        assert response.status_code == 400
        assert body["field"] == "name"
        assert body["validation_type"] == "empty_check"

    @pytest.mark.asyncio
    async def test_duplicate_email_hides_email_detail(self):
        response = await handle_domain_error(
            _request(), app_error.duplicate_email("a@b.com")
        )
        body = json.loads(response.body)

        assert response.status_code == 409
        assert body["conflict_type"] == "Duplicate e-mail"
        assert "email" not in body

    @pytest.mark.asyncio
    async def test_unexpected_error_is_generic(self):
        response = await handle_unexpected_error(_request(), RuntimeError("db down"))
        body = json.loads(response.body)

        assert response.status_code == 500
        assert body["title"] == "Internal Server Error"
        assert "db down" not in body["detail"]
