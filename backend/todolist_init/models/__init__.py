"""
Pydantic models for provisioning inputs and results.
"""
from todolist_init.models.credentials import AppCredentials, RoleGrant
from todolist_init.models.report import BootstrapReport

__all__ = [
    "AppCredentials",
    "RoleGrant",
    "BootstrapReport",
]
