"""
Credential and role models for the application user.
"""
from pydantic import BaseModel, Field


class RoleGrant(BaseModel):
    """A built-in role scoped to one database."""
    role: str = Field(..., description="Role name, e.g. readWrite")
    db: str = Field(..., description="Database the role applies to")


class AppCredentials(BaseModel):
    """
    Username and password of the application user.

    Values are passed through as given; empty strings are left for the
    server to accept or reject.
    """
    username: str = Field(..., description="Application username")
    password: str = Field(..., repr=False, description="Application password")
