"""Contact form business rules.

A submission goes through validation, the per-address quota check,
sanitizing and timestamping before it is stored. Failures surface as
``ContactError`` subclasses carrying the message shown to the visitor.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio.core.config import settings
from portfolio.crud import message as message_crud
from portfolio.models.message import Message
from portfolio.schemas.message import MessageCreate

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 255
MAX_SUBJECT_LENGTH = 200
MAX_BODY_LENGTH = 2000

SPAM_KEYWORDS = (
    "viagra",
    "cialis",
    "pharmacy",
    "lottery",
    "winner",
    "click here",
    "buy now",
    "limited time",
    "act now",
    "congratulations you won",
    "claim your prize",
)

GENERIC_ERROR_MESSAGE = "An error occurred while submitting your message. Please try again later."


class ContactError(RuntimeError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ContactValidationError(ContactError):
    pass


class RateLimitExceededError(ContactError):
    pass


class ContactSubmissionError(ContactError):
    pass


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_valid_email(email: str) -> bool:
    if _is_blank(email):
        return False
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def contains_spam(text: str) -> bool:
    lowered = text.lower()
    return any(k in lowered for k in SPAM_KEYWORDS)


def validate_message(data: MessageCreate) -> None:
    """Raise ``ContactValidationError`` for the first rule ``data`` breaks.

    Lengths and the email format are checked on the raw input, before
    any trimming.
    """
    if _is_blank(data.name):
        raise ContactValidationError("Name is required")
    if len(data.name) > MAX_NAME_LENGTH:
        raise ContactValidationError(f"Name cannot exceed {MAX_NAME_LENGTH} characters")

    if _is_blank(data.email):
        raise ContactValidationError("Email is required")
    if len(data.email) > MAX_EMAIL_LENGTH:
        raise ContactValidationError(f"Email cannot exceed {MAX_EMAIL_LENGTH} characters")
    if not is_valid_email(data.email):
        raise ContactValidationError("Please enter a valid email address")

    if _is_blank(data.subject):
        raise ContactValidationError("Subject is required")
    if len(data.subject) > MAX_SUBJECT_LENGTH:
        raise ContactValidationError(f"Subject cannot exceed {MAX_SUBJECT_LENGTH} characters")

    if _is_blank(data.body):
        raise ContactValidationError("Message is required")
    if len(data.body) > MAX_BODY_LENGTH:
        raise ContactValidationError(f"Message cannot exceed {MAX_BODY_LENGTH} characters")

    if contains_spam(data.body):
        raise ContactValidationError("Your message appears to contain spam content")


def check_rate_limit(db: Session, ip_address: str, *, now: datetime) -> None:
    """Raise ``RateLimitExceededError`` once ``ip_address`` has used up its quota.

    A failing count query lets the submission through.
    """
    max_messages = settings.RATE_LIMIT_MAX_MESSAGES
    window_minutes = settings.RATE_LIMIT_WINDOW_MINUTES
    since = now - timedelta(minutes=window_minutes)

    try:
        count = message_crud.count_messages_from_ip_since(db, ip_address=ip_address, since=since)
    except SQLAlchemyError:
        logger.exception("Error checking rate limit for IP: %s", ip_address)
        db.rollback()
        return

    if count >= max_messages:
        raise RateLimitExceededError(
            f"You have exceeded the maximum number of messages ({max_messages}) "
            f"within {window_minutes} minutes. Please try again later."
        )


def sanitize_message(data: MessageCreate) -> MessageCreate:
    return data.model_copy(
        update={
            "name": data.name.strip(),
            "email": data.email.strip().lower(),
            "subject": data.subject.strip(),
            "body": data.body.strip(),
        }
    )


def submit_message(db: Session, data: MessageCreate, *, now: Optional[datetime] = None) -> Message:
    try:
        validate_message(data)
    except ContactValidationError as e:
        logger.warning("Contact message validation failed: %s", e.message)
        raise

    # Stored wall-clock times must all be UTC for the window comparison.
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)

    if data.ip_address:
        try:
            check_rate_limit(db, data.ip_address, now=now)
        except RateLimitExceededError:
            logger.warning("Rate limit exceeded for IP: %s", data.ip_address)
            raise

    clean = sanitize_message(data)

    try:
        msg = message_crud.create_message(
            db,
            name=clean.name,
            email=clean.email,
            subject=clean.subject,
            body=clean.body,
            submitted_at=now,
            ip_address=clean.ip_address,
        )
    except SQLAlchemyError as e:
        logger.exception("Error submitting contact message from %s", clean.email)
        db.rollback()
        raise ContactSubmissionError(GENERIC_ERROR_MESSAGE) from e

    logger.info("Contact message submitted successfully. ID: %s, From: %s", msg.id, msg.email)
    return msg


def get_message(db: Session, message_id: int) -> Optional[Message]:
    try:
        return message_crud.get_message_by_id(db, message_id)
    except SQLAlchemyError:
        logger.exception("Error retrieving contact message ID: %s", message_id)
        db.rollback()
        return None


def list_messages(db: Session, *, limit: int = 100, offset: int = 0) -> list[Message]:
    try:
        return message_crud.list_messages(db, limit=limit, offset=offset)
    except SQLAlchemyError:
        logger.exception("Error retrieving contact messages")
        db.rollback()
        return []


def database_available(db: Session) -> bool:
    try:
        return message_crud.check_connection(db)
    except SQLAlchemyError:
        logger.exception("Database connection test failed")
        return False
