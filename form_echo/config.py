"""
Runtime configuration for Form Echo
===================================

Simple settings module that reads from environment variables (only here),
and exposes a stable `settings` object for the rest of the codebase.
Avoid reading env vars anywhere else: import from this module instead.

A local `.env` file is loaded first, so `PORT=8000` in `.env` behaves the
same as exporting it in the shell.

Server
------
- PORT      : int port to listen on; default 3000
- HOST      : interface to bind; default "127.0.0.1"
- LOG_LEVEL : logging level name; default "INFO" (also used for unknown names)

Fixed values
------------
- ALLOWED_ORIGIN : the single browser origin allowed to call the service
- CREDENTIAL     : shared secret every write request must present
- PROFILE_RECORD : fixture returned on every read request

CREDENTIAL is a hardcoded literal and is deliberately NOT read from the
environment, matching the service this project reproduces.
"""

import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 3000

DEFAULT_LOG_LEVEL = "INFO"

ALLOWED_ORIGIN = "http://localhost:5173"

CREDENTIAL = "123456"

PROFILE_RECORD: Dict[str, Any] = {"name": "Ashim", "age": 19, "skills": "MERN"}


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def get_port() -> int:
    """Read PORT at call time so tests can monkeypatch the environment."""
    return _get_int("PORT", DEFAULT_PORT)


def get_log_level() -> str:
    """Read LOG_LEVEL; unknown level names fall back to INFO."""
    raw = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if raw in logging.getLevelNamesMapping():
        return raw
    return DEFAULT_LOG_LEVEL


class _Settings:
    # -------- Server --------
    PORT: int = get_port()
    HOST: str = os.getenv("HOST", "127.0.0.1")
    LOG_LEVEL: str = get_log_level()

    # -------- Fixed values --------
    ALLOWED_ORIGIN: str = ALLOWED_ORIGIN
    CREDENTIAL: str = CREDENTIAL


settings = _Settings()
