"""
Pydantic schemas for reviews.

Reviews attach a 1-5 rating and an optional comment to a service
request.  The same author may review the same request more than once.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ReviewCreate(BaseModel):
    """Schema for creating a new review."""

    request_id: Optional[int] = Field(None, description="Identifier of the reviewed service request")
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comment: Optional[str] = Field(None, description="Optional textual comment")

    @field_validator("comment")
    @classmethod
    def sanitize_comment(cls, v: Optional[str]) -> Optional[str]:
        """Trim whitespace from the comment and enforce a maximum length."""
        if v is None:
            return None
        v = v.strip()
        if len(v) > 1000:
            raise ValueError("Comment must be 1000 characters or fewer")
        return v or None


class ReviewRead(BaseModel):
    id: int
    request_id: int
    author_id: int
    rating: int
    comment: Optional[str]
    created_at: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }
