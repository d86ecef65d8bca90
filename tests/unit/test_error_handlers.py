"""
Unit tests for the domain error to HTTP status mapping.
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from devconnect.api.v1.error_handlers import register_exception_handlers, status_for
from devconnect.domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DevConnectError,
    NotFoundError,
    StoreError,
    ValidationError,
    get_user_message,
)


class _Payload(BaseModel):
    text: str = Field(min_length=3)


@pytest.fixture
def client():
    app = FastAPI()
    register_exception_handlers(app)

    errors = {
        "validation": ValidationError("Title must be between 1 and 200 characters"),
        "authentication": AuthenticationError("Token expired"),
        "authorization": AuthorizationError("User x is not the author of post y"),
        "not-found": NotFoundError("Post", "abc"),
        "store": StoreError("connection reset by peer", operation="delete"),
    }

    @app.get("/raise/{kind}")
    async def raise_error(kind: str):
        raise errors[kind]

    @app.post("/echo")
    async def echo(payload: _Payload):
        return payload

    with TestClient(app) as c:
        yield c


class TestStatusMapping:
    @pytest.mark.parametrize("error, expected", [
        (ValidationError("bad"), 400),
        (AuthenticationError("who"), 401),
        (AuthorizationError(), 403),
        (NotFoundError("Post"), 404),
        (StoreError("down"), 500),
        (DevConnectError("unknown"), 500),
    ])
    def test_status_for(self, error, expected):
        assert status_for(error) == expected

    @pytest.mark.parametrize("kind, status_code, detail", [
        ("validation", 400, "Title must be between 1 and 200 characters"),
        ("authentication", 401, "Token expired"),
        ("authorization", 403, "Not authorized"),
        ("not-found", 404, "Post not found"),
        ("store", 500, "Server error"),
    ])
    def test_error_bodies(self, client, kind, status_code, detail):
        response = client.get(f"/raise/{kind}")
        assert response.status_code == status_code
        assert response.json() == {"detail": detail}

    def test_request_validation_maps_to_400_with_first_message(self, client):
        response = client.post("/echo", json={"text": "x"})
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail.startswith("text: ")
        assert "3" in detail


class TestUserMessages:
    def test_internal_details_are_not_exposed(self):
        assert get_user_message(StoreError("password=hunter2 in URI")) == "Server error"
        assert get_user_message(RuntimeError("boom")) == "Server error"

    def test_domain_message_is_exposed(self):
        assert get_user_message(ValidationError("Name is required")) == "Name is required"
