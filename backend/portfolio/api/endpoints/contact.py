from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Form, Response, status
from sqlalchemy.orm import Session

from portfolio.api.deps import get_client_ip
from portfolio.db.session import get_db
from portfolio.schemas.message import ContactForm, ContactPageState, MessageCreate
from portfolio.services.contact_service import (
    ContactSubmissionError,
    ContactValidationError,
    RateLimitExceededError,
    submit_message,
)

router = APIRouter(prefix="/contact", tags=["contact"])

SUCCESS_MESSAGE = "Thank you for your message! I'll get back to you as soon as possible."


@router.get("", response_model=ContactPageState)
def contact_page() -> ContactPageState:
    return ContactPageState()


@router.post("", response_model=ContactPageState, status_code=status.HTTP_201_CREATED)
def submit_contact(
    response: Response,
    name: str = Form(""),
    email: str = Form(""),
    subject: str = Form(""),
    message: str = Form(""),
    ip_address: Optional[str] = Depends(get_client_ip),
    db: Session = Depends(get_db),
) -> ContactPageState:
    form = ContactForm(name=name, email=email, subject=subject, message=message)
    data = MessageCreate(name=name, email=email, subject=subject, body=message, ip_address=ip_address)

    try:
        msg = submit_message(db, data)
    except ContactValidationError as e:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return ContactPageState(error_message=e.message, form=form)
    except RateLimitExceededError as e:
        response.status_code = status.HTTP_429_TOO_MANY_REQUESTS
        return ContactPageState(error_message=e.message, form=form)
    except ContactSubmissionError as e:
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return ContactPageState(error_message=e.message, form=form)

    # A fresh form once the message is stored.
    return ContactPageState(success=True, success_message=SUCCESS_MESSAGE, message_id=msg.id)
