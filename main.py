"""
Main API module for Form Echo.

Responsibilities:
    - Serve a fixed profile on GET /
    - Echo the submitted form fields on POST /, but only when the body
      carries the shared password
    - Refuse browser requests from any origin other than the configured one

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - The credential is injected into a RequestGate at construction; the gate
      runs as a route dependency before the handler.
    - EchoHandler builds the response bodies and has no error branch.

Run with `uvicorn main:app --reload` or `python main.py`.
"""

import logging
from typing import Any, Dict, Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from form_echo.config import settings
from form_echo.gate import GateDenied, RequestGate
from form_echo.gate.dependencies import enforce_gate
from form_echo.handler import EchoHandler, ProfileRecord
from form_echo.middleware import install_origin_policy


def create_app(
    credential: Optional[str] = None,
    allowed_origin: Optional[str] = None,
) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        credential (str, optional): Shared secret for write requests.
            Defaults to the configured credential.
        allowed_origin (str, optional): The single browser origin allowed to
            call the service. Defaults to the configured origin.

    Returns:
        FastAPI: A configured application with its own gate and handler.
    """
    app = FastAPI(
        title="Form Echo",
        description="Echoes submitted form fields behind a shared-password gate",
        docs_url="/docs",
    )
    log = logging.getLogger("form_echo")

    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=settings.LOG_LEVEL,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    # ----------------------------------------------------------------
    # Per-app instances
    # ----------------------------------------------------------------
    app.state.gate = RequestGate(credential if credential is not None else settings.CREDENTIAL)
    handler = EchoHandler()

    origin = allowed_origin or settings.ALLOWED_ORIGIN
    install_origin_policy(app, origin)
    log.info("Accepting cross-origin requests from %s", origin)

    @app.exception_handler(GateDenied)
    async def gate_denied_handler(request: Request, exc: GateDenied) -> PlainTextResponse:
        return PlainTextResponse("Unauthorized", status_code=401)

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    # ----------------------------------------------------------------
    # Routes (every request on this router passes through the gate)
    # ----------------------------------------------------------------
    router = APIRouter(dependencies=[Depends(enforce_gate)])

    @router.get("/", response_model=ProfileRecord)
    def read_profile() -> Dict[str, Any]:
        """Return the fixed profile. Never fails."""
        return handler.read()

    @router.post("/")
    def submit_form(payload: Any = Depends(enforce_gate)) -> JSONResponse:
        """
        Echo the submitted body unchanged.

        The gate has already checked the password by the time this runs.
        The password field is echoed back too (kept for parity, do not copy).
        """
        return JSONResponse(handler.write(payload))

    app.include_router(router)
    return app


# `uvicorn main:app --reload` and `from main import app` continue to work.
app = create_app()


if __name__ == "__main__":
    logging.getLogger("form_echo").info("Server is running on PORT %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
