from __future__ import annotations

from portfolio.schemas.message import ContactForm, ContactPageState, MessageCreate, MessageOut

__all__ = [
    "ContactForm",
    "ContactPageState",
    "MessageCreate",
    "MessageOut",
]
