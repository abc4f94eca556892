"""
Integration tests for the Form Echo HTTP contract.

Covers:
    - GET / always returns the fixed profile
    - POST / echoes the body with the right password, 401 otherwise
    - loose password comparison over the wire
    - malformed, non-JSON, oversized and non-container bodies
"""

import logging

import pytest
from fastapi.testclient import TestClient

from main import create_app

PROFILE = {"name": "Ashim", "age": 19, "skills": "MERN"}
SUBMISSION = {"userName": "Alice", "email": "a@x.com", "age": "30", "password": "123456"}


def test_get_returns_profile(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == PROFILE


def test_get_ignores_any_body(client):
    response = client.request("GET", "/", content=b"{not json")
    assert response.status_code == 200
    assert response.json() == PROFILE


def test_post_with_password_echoes_body(client):
    response = client.post("/", json=SUBMISSION)
    assert response.status_code == 200
    assert response.json() == SUBMISSION


def test_post_with_wrong_password_is_unauthorized(client):
    response = client.post("/", json={**SUBMISSION, "password": "wrong"})
    assert response.status_code == 401
    assert response.text == "Unauthorized"
    assert response.headers["content-type"].startswith("text/plain")


def test_post_with_numeric_password_passes(client):
    body = {**SUBMISSION, "password": 123456}
    response = client.post("/", json=body)
    assert response.status_code == 200
    assert response.json() == body
    assert response.json()["password"] == 123456


@pytest.mark.parametrize("body", [
    {"userName": "Alice"},
    {},
    ["123456"],
])
def test_post_without_password_field_is_unauthorized(client, body):
    response = client.post("/", json=body)
    assert response.status_code == 401
    assert response.text == "Unauthorized"


def test_post_without_body_is_unauthorized(client):
    response = client.post("/")
    assert response.status_code == 401


def test_post_with_malformed_json_is_bad_request(client):
    response = client.post("/", content=b"{oops", headers={"content-type": "application/json"})
    assert response.status_code == 400


def test_post_with_out_of_range_number_is_bad_request(client):
    response = client.post(
        "/",
        content=b'{"password":"123456","big":1e400}',
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 400


def test_post_with_nan_literal_is_bad_request(client):
    response = client.post(
        "/",
        content=b'{"password":"123456","x":NaN}',
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 400


@pytest.mark.parametrize("content", [b'"123456"', b"123456", b"true", b"null"])
def test_post_with_top_level_primitive_is_bad_request(client, content):
    response = client.post("/", content=content, headers={"content-type": "application/json"})
    assert response.status_code == 400


@pytest.mark.parametrize("content_type", ["text/plain", "application/x-www-form-urlencoded", None])
def test_post_non_json_body_is_not_parsed(client, content_type):
    headers = {"content-type": content_type} if content_type else {}
    response = client.post("/", content=b'{"password":"123456"}', headers=headers)
    assert response.status_code == 401
    assert response.text == "Unauthorized"


def test_post_json_with_charset_is_parsed(client):
    response = client.post(
        "/",
        content=b'{"password":"123456"}',
        headers={"content-type": "application/json; charset=utf-8"},
    )
    assert response.status_code == 200
    assert response.json() == {"password": "123456"}


def test_post_over_size_limit_is_rejected(client):
    body = {"password": "123456", "filler": "x" * (100 * 1024)}
    response = client.post("/", json=body)
    assert response.status_code == 413


def test_post_echoes_arbitrary_fields(client):
    body = {"password": "123456", "nested": {"a": [1, 2.5, None]}, "flag": True}
    response = client.post("/", json=body)
    assert response.status_code == 200
    assert response.json() == body


def test_denied_secret_is_not_logged(client, caplog):
    with caplog.at_level(logging.DEBUG):
        client.post("/", json={**SUBMISSION, "password": "hunter2"})
    assert "hunter2" not in caplog.text


def test_credential_is_injected():
    other = TestClient(create_app(credential="letmein"))
    assert other.post("/", json={"password": "letmein"}).status_code == 200
    assert other.post("/", json={"password": "123456"}).status_code == 401


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
