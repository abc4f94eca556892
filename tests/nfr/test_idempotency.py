"""
NFR: repeated identical requests get identical responses.

The gate and handler keep no per-request state, so N identical writes must
produce N identical responses, both for accepted and for denied requests.
"""

import pytest

pytestmark = pytest.mark.nfr

N = 200


def _responses(client, body):
    return {(r.status_code, r.content) for r in (client.post("/", json=body) for _ in range(N))}


def test_repeated_valid_writes_are_identical(client):
    body = {"userName": "Alice", "email": "a@x.com", "age": "30", "password": "123456"}
    results = _responses(client, body)
    assert len(results) == 1
    status, _ = next(iter(results))
    assert status == 200


def test_repeated_invalid_writes_are_identical(client):
    results = _responses(client, {"password": "wrong"})
    assert results == {(401, b"Unauthorized")}


def test_repeated_reads_are_identical(client):
    results = {client.get("/").content for _ in range(N)}
    assert len(results) == 1
