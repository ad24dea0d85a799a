from __future__ import annotations

from portfolio.models.message import Message

__all__ = ["Message"]
