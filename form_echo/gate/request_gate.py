"""
Request Gate for Form Echo.

Responsibilities:
    - Decide whether a request may proceed to the echo handler
    - Let read requests through unconditionally
    - Require write requests to carry a "password" field loosely equal
      to the shared credential

The gate is a pure per-request predicate: the only thing it remembers
between calls is the credential it was constructed with.
"""

import enum
from typing import Any, Mapping

from .comparison import loose_equals

__all__ = ["Decision", "GateDenied", "RequestGate", "READ_METHOD"]

READ_METHOD = "GET"


class Decision(enum.Enum):
    """Outcome of a gate check."""
    ALLOW = "allow"
    DENY = "deny"


class GateDenied(Exception):
    """Raised when a write request fails the credential check."""

    def __init__(self, method: str):
        super().__init__(f"{method} request denied")
        self.method = method


class RequestGate:
    def __init__(self, credential: str):
        """
        Bind the gate to a credential.

        Args:
            credential (str): Shared secret that write requests must present.
                Stored once and never changed for the lifetime of the gate.
        """
        self._credential = credential

    @property
    def credential(self) -> str:
        return self._credential

    @staticmethod
    def is_read(method: str) -> bool:
        """True for the read verb, which bypasses the credential check."""
        return method.upper() == READ_METHOD

    def decide(self, method: str, payload: Any = None) -> Decision:
        """
        Decide ALLOW or DENY for a request.

        Args:
            method (str): HTTP method of the request (case-insensitive).
            payload (Any): Decoded request body. Anything other than a mapping
                is treated as a body without a "password" field.

        Returns:
            Decision: ALLOW for read requests regardless of payload; for any
            other method, ALLOW only if payload["password"] loosely equals the
            credential (a numeric 123456 matches "123456").

        Notes:
            - The payload is never modified.
        """
        if self.is_read(method):
            return Decision.ALLOW
        if not isinstance(payload, Mapping) or "password" not in payload:
            return Decision.DENY
        if loose_equals(payload["password"], self._credential):
            return Decision.ALLOW
        return Decision.DENY

    def check(self, method: str, payload: Any = None) -> None:
        """Same rule as `decide`, raising GateDenied instead of returning DENY."""
        if self.decide(method, payload) is Decision.DENY:
            raise GateDenied(method.upper())
