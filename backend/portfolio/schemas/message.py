from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MessageCreate(BaseModel):
    # Raw visitor input; checked by the contact service so each failure
    # gets its own user-facing message instead of a 422.
    name: str = ""
    email: str = ""
    subject: str = ""
    body: str = ""
    ip_address: Optional[str] = None


class MessageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    subject: str
    body: str
    submitted_at: datetime
    ip_address: Optional[str] = None


class ContactForm(BaseModel):
    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""


class ContactPageState(BaseModel):
    """What the contact page shows after a GET or a submission."""

    success: bool = False
    success_message: Optional[str] = None
    error_message: Optional[str] = None
    message_id: Optional[int] = None
    form: ContactForm = Field(default_factory=ContactForm)
