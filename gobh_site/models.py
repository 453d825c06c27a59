"""
Pydantic models for stored documents and API responses.
"""
from typing import Optional

from pydantic import BaseModel, Field

from .utils import new_id, now_iso

CONTACT_COLLECTION = "contact_submissions"
STATUS_COLLECTION = "status_checks"


class ContactSubmission(BaseModel):
    """A lead captured by the contact form."""
    id: str = Field(default_factory=new_id)
    name: str
    email: str
    phone: str
    address: str
    agreeToTerms: bool = True
    submittedAt: str = Field(default_factory=now_iso)
    status: str = "new"


class ContactAccepted(BaseModel):
    """Response for an accepted contact form submission."""
    message: str
    id: str


class StatusCheck(BaseModel):
    """A heartbeat record posted by a client."""
    id: str = Field(default_factory=new_id)
    client_name: str
    timestamp: str = Field(default_factory=now_iso)


class ApiMessage(BaseModel):
    message: str


class ApiError(BaseModel):
    error: str
    details: Optional[str] = None
