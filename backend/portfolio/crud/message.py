from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import func, select, text
from sqlalchemy.orm import Session

from portfolio.models.message import Message


def create_message(
    db: Session,
    *,
    name: str,
    email: str,
    subject: str,
    body: str,
    submitted_at: datetime,
    ip_address: Optional[str] = None,
) -> Message:
    msg = Message(
        name=name,
        email=email,
        subject=subject,
        body=body,
        submitted_at=submitted_at,
        ip_address=ip_address,
    )
    db.add(msg)
    db.commit()
    return msg


def get_message_by_id(db: Session, message_id: int) -> Optional[Message]:
    return db.execute(select(Message).where(Message.id == message_id)).scalar_one_or_none()


def list_messages(db: Session, *, limit: int = 100, offset: int = 0) -> list[Message]:
    stmt = (
        select(Message)
        .order_by(Message.submitted_at.desc(), Message.id.desc())
        .offset(offset)
        .limit(limit)
    )
    return list(db.execute(stmt).scalars().all())


def count_messages_from_ip_since(db: Session, *, ip_address: str, since: datetime) -> int:
    stmt = (
        select(func.count())
        .select_from(Message)
        .where(Message.ip_address == ip_address, Message.submitted_at >= since)
    )
    return int(db.execute(stmt).scalar_one())


def check_connection(db: Session) -> bool:
    db.execute(text("SELECT 1"))
    return True
