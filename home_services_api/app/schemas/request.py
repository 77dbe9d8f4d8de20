"""
Pydantic models for service requests.

A service request is posted by a client describing the job (type,
location, preferred time).  Its ``status`` moves through
``new -> offered -> accepted -> completed``; ``in_progress`` and
``cancelled`` are valid stored values that no endpoint sets yet.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

RequestStatus = Literal["new", "offered", "accepted", "in_progress", "completed", "cancelled"]

REQUEST_STATUSES = ("new", "offered", "accepted", "in_progress", "completed", "cancelled")

# Statuses in which a request still takes offers and can be accepted.
OPEN_STATUSES = ("new", "offered")


class RequestCreate(BaseModel):
    type: Optional[str] = Field(None, examples=["plumbing"])
    description: Optional[str] = Field(None, examples=["Kitchen sink is leaking"])
    location: Optional[str] = Field(None, examples=["Riyadh, Al Olaya"])
    preferred_time: Optional[str] = Field(None, examples=["2025-09-01T10:00"])


class ClientBrief(BaseModel):
    id: int
    full_name: str
    phone: str


class RequestRead(BaseModel):
    """Schema for reading a service request."""

    id: int
    type: str
    description: Optional[str] = None
    location: Optional[str] = None
    preferred_time: Optional[str] = None
    status: RequestStatus
    client_id: int
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    client: Optional[ClientBrief] = None

    model_config = {
        "from_attributes": True,
    }


class CompleteResponse(BaseModel):
    ok: bool = True
