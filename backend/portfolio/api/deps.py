from __future__ import annotations

import secrets
from typing import Optional

from fastapi import Header, HTTPException, Request, status

from portfolio.core.config import settings

MAX_IP_LENGTH = 50


def get_client_ip(request: Request) -> Optional[str]:
    # Behind a proxy the visitor is the first hop listed in X-Forwarded-For.
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first[:MAX_IP_LENGTH]

    if request.client and request.client.host:
        return request.client.host[:MAX_IP_LENGTH]
    return None


def require_admin(x_admin_key: Optional[str] = Header(default=None)) -> None:
    expected = settings.ADMIN_API_KEY
    if not expected or not x_admin_key or not secrets.compare_digest(x_admin_key, expected):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
