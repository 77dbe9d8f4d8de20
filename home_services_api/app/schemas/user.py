"""
Pydantic models for user data.

Registration and login bodies are deliberately permissive: required
fields are checked by the auth endpoints so that a missing field is
reported as ``missing_fields`` rather than a generic validation error.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

Role = Literal["client", "provider", "admin"]


class RegisterRequest(BaseModel):
    """Schema for registering a user.

    ``full_name``, ``phone`` and ``password`` are required.  ``role``
    defaults to ``client``; ``admin`` is only accepted for the very
    first account.  ``service_types`` is a comma-separated list of the
    services a provider offers.
    """

    full_name: Optional[str] = Field(None, examples=["Sara Ali"])
    phone: Optional[str] = Field(None, examples=["+966500000000"])
    email: Optional[str] = Field(None, examples=["sara@example.com"])
    password: Optional[str] = Field(None, examples=["strongpassword"])
    role: Optional[Role] = Field(None, examples=["client"])
    city: Optional[str] = Field(None, examples=["Riyadh"])
    service_types: Optional[str] = Field(None, examples=["plumbing,electrical"])


class LoginRequest(BaseModel):
    phone: Optional[str] = None
    password: Optional[str] = None


class UserBrief(BaseModel):
    id: int
    full_name: str
    role: Role


class UserRead(UserBrief):
    """Full user profile, never including the password hash."""

    phone: str
    email: Optional[str] = None
    city: Optional[str] = None
    service_types: Optional[str] = None
    created_at: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }


class AuthResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserBrief
