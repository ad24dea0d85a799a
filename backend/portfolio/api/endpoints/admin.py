from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from portfolio.api import deps
from portfolio.db.session import get_db
from portfolio.schemas.message import MessageOut
from portfolio.services.contact_service import get_message, list_messages

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(deps.require_admin)])


@router.get("/messages", response_model=list[MessageOut])
def admin_list_messages(
    db: Session = Depends(get_db),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
) -> list[MessageOut]:
    return list_messages(db, limit=limit, offset=offset)


@router.get("/messages/{message_id}", response_model=MessageOut)
def admin_get_message(message_id: int, db: Session = Depends(get_db)) -> MessageOut:
    msg = get_message(db, message_id)
    if msg is None:
        raise HTTPException(status_code=404, detail="Message not found")
    return msg
