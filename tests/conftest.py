"""
Global pytest fixtures for the Form Echo test suite.

Responsibilities:
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
    - Provide a RequestGate and EchoHandler for direct unit testing

Using `create_app()` gives each test its own gate and handler instances.
"""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from form_echo.gate import RequestGate
from form_echo.handler import EchoHandler

CREDENTIAL = "123456"
ALLOWED_ORIGIN = "http://localhost:5173"


@pytest.fixture
def client() -> TestClient:
    """Provide a fresh TestClient with a new app instance."""
    app = create_app(credential=CREDENTIAL, allowed_origin=ALLOWED_ORIGIN)
    return TestClient(app)


@pytest.fixture
def gate() -> RequestGate:
    return RequestGate(CREDENTIAL)


@pytest.fixture
def handler() -> EchoHandler:
    return EchoHandler()
