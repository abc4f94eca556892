"""
Echo Handler for Form Echo.

Responsibilities:
    - Return the fixed ProfileRecord on read requests
    - Return the submitted payload verbatim on write requests

The handler has no error branch: it assumes the request gate already
rejected unauthorized writes.

Warning:
    `write` echoes the payload back INCLUDING the "password" field. This is
    kept on purpose to reproduce the observed service; a real system must
    never send a submitted secret back to the caller.
"""

import copy
from typing import Any, Dict, Mapping, Optional

from form_echo.config import PROFILE_RECORD

from .schemas import ProfileRecord


class EchoHandler:
    def __init__(self, profile: Optional[Mapping[str, Any]] = None):
        """
        Args:
            profile (Mapping, optional): Fixture for read requests. Validated
                against ProfileRecord; defaults to the configured record.
        """
        record = ProfileRecord(**(profile if profile is not None else PROFILE_RECORD))
        self._profile: Dict[str, Any] = record.model_dump()

    def read(self) -> Dict[str, Any]:
        """Return a copy of the profile fixture; same content on every call."""
        return dict(self._profile)

    def write(self, payload: Any) -> Any:
        """
        Return the submitted payload unchanged.

        Args:
            payload (Any): Decoded body of a write request that passed the gate.

        Returns:
            Any: A deep copy equal to `payload`, field for field, password included.
        """
        return copy.deepcopy(payload)
