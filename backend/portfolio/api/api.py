from __future__ import annotations

from fastapi import APIRouter

from portfolio.api.endpoints import admin, contact, resume

api_router = APIRouter()

api_router.include_router(contact.router)
api_router.include_router(resume.router)
api_router.include_router(admin.router)
