"""
Request gate: the credential check applied to write requests.
"""

from .comparison import loose_equals
from .request_gate import Decision, GateDenied, RequestGate

__all__ = ["Decision", "GateDenied", "RequestGate", "loose_equals"]
