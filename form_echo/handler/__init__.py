"""
Echo handler: builds response bodies for requests that passed the gate.
"""

from .echo import EchoHandler
from .schemas import ProfileRecord

__all__ = ["EchoHandler", "ProfileRecord"]
