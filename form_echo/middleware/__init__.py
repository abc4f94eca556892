"""
Transport-layer middleware.
"""

from .origin import OriginGuardMiddleware, install_origin_policy

__all__ = ["OriginGuardMiddleware", "install_origin_policy"]
