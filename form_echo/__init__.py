"""
form_echo package initializer.
"""

from . import gate
from . import handler
from . import middleware

__all__ = ["gate", "handler", "middleware"]
