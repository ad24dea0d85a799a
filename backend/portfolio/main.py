from __future__ import annotations

from fastapi import Depends, FastAPI, Request
from fastapi.responses import Response
from sqlalchemy.orm import Session

from portfolio.api.api import api_router
from portfolio.core.config import settings
from portfolio.core.logging import configure_logging
from portfolio.db.base import Base
from portfolio.db.session import engine, get_db
from portfolio.services.contact_service import database_available

import portfolio.models


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.PROJECT_NAME)

    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)

        origin = request.headers.get("origin")
        if "*" in settings.CORS_ORIGINS:
            response.headers["Access-Control-Allow-Origin"] = origin or "*"
        elif origin in settings.CORS_ORIGINS:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Vary"] = "Origin"

        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        request_headers = request.headers.get("Access-Control-Request-Headers")
        if request_headers:
            response.headers["Access-Control-Allow-Headers"] = request_headers
        else:
            response.headers["Access-Control-Allow-Headers"] = "*"

        response.headers["Access-Control-Allow-Credentials"] = "false"
        return response

    @app.get("/health")
    def health(db: Session = Depends(get_db)) -> dict:
        db_status = "ok" if database_available(db) else "unavailable"
        return {"status": "ok", "database": db_status}

    @app.on_event("startup")
    def on_startup() -> None:
        Base.metadata.create_all(bind=engine)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


app = create_app()
