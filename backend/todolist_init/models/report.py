"""
Outcome of a bootstrap run.
"""
from pydantic import BaseModel, Field


class BootstrapReport(BaseModel):
    """What a bootstrap run created in the target database."""
    db_name: str
    username: str
    user_created: bool = Field(
        default=False,
        description="False when the user already existed and was skipped"
    )
    collections_created: list[str] = Field(
        default_factory=list,
        description="Collections created by this run"
    )
