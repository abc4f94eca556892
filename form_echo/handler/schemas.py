"""
Pydantic schemas for responses produced by the echo handler.
"""

from pydantic import BaseModel


class ProfileRecord(BaseModel):
    """Schema for the fixed profile returned on read requests."""
    name: str
    age: int
    skills: str
