"""Activity Group Schemas — create and update bodies.

Invariants:
    - Every field optional at the type level; required-ness decided by services
"""

from pydantic import BaseModel, ConfigDict


class ActivityGroupCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    email: str | None = None


class ActivityGroupUpdate(BaseModel):
    """Only title is writable; email and created_at are ignored if sent."""
    model_config = ConfigDict(extra="ignore")

    title: str | None = None
